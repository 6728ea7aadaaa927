from __future__ import annotations

from mdtovue.models.page import CompileResult, Header, PageData
from mdtovue.models.render import FrontmatterResult, RenderData, RenderOutput

__all__ = [
    # page
    "Header",
    "PageData",
    "CompileResult",
    # render
    "RenderData",
    "RenderOutput",
    "FrontmatterResult",
]
