"""Process-level wiring.

Responsibilities (and nothing more):
- Configure structlog
- Build the CompilerState shared by every compile in this process
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from mdtovue.cache import CompileCache
from mdtovue.config import Settings
from mdtovue.filestat import OsFileStat
from mdtovue.frontmatter import YamlFrontmatter
from mdtovue.renderer import MarkdownItRenderer
from mdtovue.state import CompilerState
from mdtovue.transpiler import SubprocessTranspiler

if TYPE_CHECKING:
    from mdtovue.protocols import (
        CacheProtocol,
        FileStatProtocol,
        FrontmatterProtocol,
        RendererProtocol,
        TranspilerProtocol,
    )


def setup_logging(settings: Settings) -> None:
    """Configure structlog. Call once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout may carry the host build tool's output
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def build_state(
    settings: Settings | None = None,
    *,
    cache: CacheProtocol | None = None,
    frontmatter: FrontmatterProtocol | None = None,
    renderer: RendererProtocol | None = None,
    transpiler: TranspilerProtocol | None = None,
    file_stat: FileStatProtocol | None = None,
) -> CompilerState:
    """Create the CompilerState, using default adapters for anything not given."""
    settings = settings or Settings()
    if cache is None:
        cache = CompileCache(settings.cache.max_entries)
    if renderer is None:
        renderer = MarkdownItRenderer(demo_language=settings.compiler.demo_language)
    if transpiler is None:
        transpiler = SubprocessTranspiler(settings.transpiler.command)
    if frontmatter is None:
        frontmatter = YamlFrontmatter()
    if file_stat is None:
        file_stat = OsFileStat()
    return CompilerState(
        settings=settings,
        cache=cache,
        frontmatter=frontmatter,
        renderer=renderer,
        transpiler=transpiler,
        file_stat=file_stat,
    )
