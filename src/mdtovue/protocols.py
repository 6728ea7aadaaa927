"""Protocol interfaces for swappable components.

The compile pipeline and CompilerState reference these protocols, not the
concrete adapters. This allows:
- Tests to use deterministic in-memory fakes
- Other markdown engines or transpilers to be swapped in without touching
  the pipeline
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mdtovue.models import CompileResult, FrontmatterResult, RenderOutput


class CacheProtocol(Protocol):
    """Interface for the compile result cache."""

    def get(self, source: str) -> CompileResult | None: ...

    def set(self, source: str, result: CompileResult) -> None: ...


class FrontmatterProtocol(Protocol):
    """Splits raw source into body and metadata."""

    async def extract(self, source: str) -> FrontmatterResult: ...


class RendererProtocol(Protocol):
    """Renders markdown into HTML plus headers and an optional demo source."""

    async def render(self, text: str) -> RenderOutput: ...


class TranspilerProtocol(Protocol):
    """Strips static type syntax from a script body. May return ``""``."""

    async def transpile(self, source: str) -> str: ...


class FileStatProtocol(Protocol):
    async def modified_time_ms(self, path: str) -> int: ...
