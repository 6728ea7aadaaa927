"""Compiler state container.

CompilerState is created once per process (see ``mdtovue.app.build_state``)
and passed to every ``compile_markdown`` call. The cache is the only mutable
member shared between concurrent compiles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdtovue.config import Settings
    from mdtovue.protocols import (
        CacheProtocol,
        FileStatProtocol,
        FrontmatterProtocol,
        RendererProtocol,
        TranspilerProtocol,
    )


@dataclass
class CompilerState:
    """Holds settings, the compile cache and the injected collaborators."""

    settings: Settings
    cache: CacheProtocol
    frontmatter: FrontmatterProtocol
    renderer: RendererProtocol
    transpiler: TranspilerProtocol
    file_stat: FileStatProtocol
