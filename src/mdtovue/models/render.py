from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from mdtovue.models.page import Header


class RenderData(BaseModel):
    headers: list[Header] = []
    demo_source: str | None = None  # Present only when a demo fence was found


class RenderOutput(BaseModel):
    """HTML plus structured data produced by a markdown renderer."""

    html: str
    data: RenderData = RenderData()


class FrontmatterResult(BaseModel):
    body: str
    metadata: dict[str, Any] = {}
