"""Dual-variant demo component generation.

When a document carries a demo fence, the component shows the demo live and
offers its source twice: in the original (typed) dialect and as a "vanilla"
variant with type syntax stripped by the transpiler. Both sources travel
base64-encoded inside an escaped JSON payload attribute so the preview can
offer copy / open-in-playground actions.

Missing SFC parts degrade to empty strings. Transpiler failures propagate and
abort the whole compile.
"""

from __future__ import annotations

import base64
import html
from typing import TYPE_CHECKING, Any

import structlog
from pydantic_core import to_json

from mdtovue.escaper import escape_template_tokens
from mdtovue.sfc import as_default_slot, split_sfc

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mdtovue.models import Header, PageData
    from mdtovue.state import CompilerState

log = structlog.get_logger()


def find_caption(headers: Sequence[Header], title: str) -> str | None:
    """Content of the first header whose title equals *title* exactly."""
    for header in headers:
        if header.title == title:
            return header.content
    return None


def code_marker(language: str) -> str:
    """Opening tag the renderer emits for a highlighted *language* fence."""
    return f'<pre class="language-{language}" v-pre>'


def _b64(source: str) -> str:
    return base64.b64encode(source.encode("utf-8")).decode("ascii")


def _fence(language: str, source: str) -> str:
    return f"```{language}\n{source}\n```"


def build_payload(
    *,
    us: str | None,
    cn: str | None,
    doc_html: str,
    page_data: PageData,
    source_code: str,
    js_source_code: str,
) -> str:
    """Serialise the preview payload and escape it for a markup attribute."""
    payload: dict[str, Any] = {
        "us": us,
        "cn": cn,
        "docHtml": doc_html,
        # Frontmatter keys may override the ones above, keeping their position.
        **page_data.frontmatter,
        "relativePath": page_data.relative_path,
        "sourceCode": _b64(source_code),
        "jsSourceCode": _b64(js_source_code),
    }
    return html.escape(to_json(payload).decode("utf-8"))


async def generate_demo_component(
    demo_source: str,
    headers: Sequence[Header],
    page_data: PageData,
    state: CompilerState,
) -> str:
    """Build the component source for a document with a demo block."""
    compiler_settings = state.settings.compiler
    language = compiler_settings.demo_language
    locales = compiler_settings.locale_titles

    cn = find_caption(headers, locales.cn)
    us = find_caption(headers, locales.us)

    original = await state.renderer.render(_fence(language, demo_source.strip()))
    original_html = escape_template_tokens(original.html)

    parts = split_sfc(demo_source)
    js_code = ""
    if parts.script_content:
        js_code = (await state.transpiler.transpile(parts.script_content)).strip()
    js_script = f"<script>\n{js_code}\n</script>" if js_code else ""

    vanilla_source = "\n".join(
        part for part in (parts.text("template"), js_script, parts.text("style")) if part
    ).strip()
    vanilla = await state.renderer.render(_fence(language, vanilla_source))
    vanilla_html = escape_template_tokens(vanilla.html)

    payload = build_payload(
        us=us,
        cn=cn,
        doc_html=page_data.html.partition(code_marker(language))[0],
        page_data=page_data,
        source_code=demo_source,
        js_source_code=vanilla_source,
    )
    log.debug(
        "demo_generated",
        relative_path=page_data.relative_path,
        has_vanilla_script=bool(js_script),
    )

    component = compiler_settings.demo_component
    return f"""
<template>
  <{component} :jsfiddle="{payload}">
    {as_default_slot(parts.text("template"))}
    <template #htmlCode>{original_html}</template>
    <template #jsVersionHtml>{vanilla_html}</template>
  </{component}>
</template>
{parts.text("script")}
{parts.text("style")}
"""
