"""Markdown renderer backed by markdown-it-py.

Produces HTML together with the structured data the compiler needs:
level-2/3 headings (with the markdown text under each heading) and the source
of the first demo fence. Fences render as
``<pre class="language-{lang}" v-pre><code>...</code></pre>`` so that Vue
leaves code samples untouched.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import structlog
from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from mdtovue.errors import RenderError
from mdtovue.header import parse_header
from mdtovue.models import Header, RenderData, RenderOutput

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markdown_it.token import Token

log = structlog.get_logger()

HEADER_LEVELS = (2, 3)

_SLUG_SEPARATOR_RE = re.compile(r"[\s~`!@#$%^&*()\-_+=\[\]{}|\;:\"'<>,.?/]+")


def slugify(title: str) -> str:
    return _SLUG_SEPARATOR_RE.sub("-", title).strip("-").lower()


def fence_language(info: str) -> str:
    info = info.strip()
    return info.split(maxsplit=1)[0] if info else ""


def _render_fence(self: Any, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
    token = tokens[idx]
    language = fence_language(token.info)
    class_attr = f' class="language-{escapeHtml(language)}"' if language else ""
    return f"<pre{class_attr} v-pre><code>{escapeHtml(token.content)}</code></pre>\n"


def build_markdown_it() -> MarkdownIt:
    """Configure a CommonMark renderer with tables, strikethrough and raw HTML."""
    md = MarkdownIt("commonmark", {"html": True})
    md.enable("table").enable("strikethrough")
    md.add_render_rule("fence", _render_fence)
    return md


class MarkdownItRenderer:
    """RendererProtocol implementation."""

    def __init__(
        self,
        md: MarkdownIt | None = None,
        *,
        demo_language: str = "vue",
        header_levels: Sequence[int] = HEADER_LEVELS,
    ) -> None:
        self._md = md or build_markdown_it()
        self._demo_language = demo_language
        self._header_levels = frozenset(header_levels)

    async def render(self, text: str) -> RenderOutput:
        try:
            env: dict[str, Any] = {}
            tokens = self._md.parse(text, env)
            data = self._collect_data(tokens, text)
            html = self._md.renderer.render(tokens, self._md.options, env)
        except Exception as exc:
            raise RenderError(f"Failed to render markdown: {exc}") from exc
        return RenderOutput(html=html, data=data)

    def _collect_data(self, tokens: Sequence[Token], text: str) -> RenderData:
        lines = text.splitlines()
        # A header's content runs until the next top-level heading or fence.
        boundaries = sorted(
            token.map[0]
            for token in tokens
            if token.type in ("heading_open", "fence") and token.level == 0 and token.map
        )

        headers: list[Header] = []
        for idx, token in enumerate(tokens):
            if token.type != "heading_open":
                continue
            level = int(token.tag[1:])
            title = parse_header(tokens[idx + 1].content)
            slug = slugify(title)
            if slug:
                token.attrSet("id", slug)
            if level not in self._header_levels or token.level != 0 or not token.map:
                continue

            body_start = token.map[1]
            body_end = next((start for start in boundaries if start >= body_start), len(lines))
            content = "\n".join(lines[body_start:body_end]).strip()
            headers.append(Header(level=level, title=title, slug=slug, content=content))

        demo_source = None
        for token in tokens:
            if token.type == "fence" and fence_language(token.info) == self._demo_language:
                # An empty demo fence counts as no demo
                demo_source = token.content if token.content.strip() else None
                break
        if demo_source is not None:
            log.debug("demo_fence_found", language=self._demo_language)

        return RenderData(headers=headers, demo_source=demo_source)
