"""Integration test fixtures.

Provides a CompilerState wired with the real markdown-it renderer and YAML
frontmatter adapter, plus deterministic fakes for the transpiler and file
stat collaborators. Every fake records its calls so tests can assert on
cache hits.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from mdtovue.app import build_state
from mdtovue.renderer import MarkdownItRenderer

if TYPE_CHECKING:
    from mdtovue.config import Settings
    from mdtovue.models import RenderOutput
    from mdtovue.state import CompilerState

FIXED_MTIME_MS = 1_700_000_000_000


class CountingRenderer:
    """Delegates to the real renderer and records every input."""

    def __init__(self, inner: MarkdownItRenderer | None = None) -> None:
        self.inner = inner or MarkdownItRenderer()
        self.calls: list[str] = []
        self.error: Exception | None = None

    async def render(self, text: str) -> RenderOutput:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return await self.inner.render(text)


class FakeTranspiler:
    """Returns a fixed output, or the result of a callable, for any input."""

    def __init__(self, output: str | Callable[[str], str] = "") -> None:
        self.output = output
        self.calls: list[str] = []
        self.error: Exception | None = None

    async def transpile(self, source: str) -> str:
        self.calls.append(source)
        if self.error is not None:
            raise self.error
        if callable(self.output):
            return self.output(source)
        return self.output


class FakeFileStat:
    def __init__(self, mtime_ms: int = FIXED_MTIME_MS) -> None:
        self.mtime_ms = mtime_ms
        self.calls: list[str] = []
        self.error: Exception | None = None

    async def modified_time_ms(self, path: str) -> int:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.mtime_ms


@pytest.fixture()
def renderer() -> CountingRenderer:
    return CountingRenderer()


@pytest.fixture()
def transpiler() -> FakeTranspiler:
    return FakeTranspiler()


@pytest.fixture()
def file_stat() -> FakeFileStat:
    return FakeFileStat()


@pytest.fixture()
def state(
    settings: Settings,
    renderer: CountingRenderer,
    transpiler: FakeTranspiler,
    file_stat: FakeFileStat,
) -> CompilerState:
    """CompilerState rooted at /docs with fake transpiler and file stat."""
    return build_state(
        settings,
        renderer=renderer,
        transpiler=transpiler,
        file_stat=file_stat,
    )
