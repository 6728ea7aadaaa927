from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Header(BaseModel):
    """A heading collected by the renderer.

    Only ``title`` and ``content`` are relied on by the compiler; renderers may
    attach extra fields.
    """

    model_config = ConfigDict(extra="allow")

    level: int
    title: str
    slug: str = ""
    content: str = ""  # Markdown text between this heading and the next one


class PageData(BaseModel):
    """Structured page metadata embedded into the generated component."""

    # camelCase on the wire: relativePath, lastUpdated
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    frontmatter: dict[str, Any] = {}
    headers: list[Header] = []
    relative_path: str
    content: str  # HTML-escaped post-frontmatter body
    html: str
    last_updated: int  # File mtime in integer milliseconds

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class CompileResult(BaseModel):
    """Output of one compile. Immutable; shared by every cache hit."""

    model_config = ConfigDict(frozen=True)

    component_source: str
    page_data: PageData
