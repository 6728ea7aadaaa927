"""Markdown → Vue component compile pipeline.

Receives CompilerState and orchestrates cache lookup / frontmatter split /
render / metadata / component assembly. Every collaborator failure propagates
unchanged, and the cache is only written after a fully successful compile.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from mdtovue.demo import generate_demo_component
from mdtovue.escaper import escape_template_tokens
from mdtovue.metadata import build_page_data, to_relative_path
from mdtovue.models import CompileResult
from mdtovue.sfc import fetch_style

if TYPE_CHECKING:
    from mdtovue.models import PageData
    from mdtovue.state import CompilerState


def plain_component(page_data: PageData, body: str) -> str:
    """Component source for a document without a demo block."""
    return f"""
<template><article class="markdown">{page_data.html}</article></template>

<script>
export default {{ pageData: {page_data.to_json()} }}
</script>
{fetch_style(body) or ""}
"""


async def compile_markdown(
    src: str,
    file: str,
    state: CompilerState,
    *,
    root: str | None = None,
) -> CompileResult:
    """Compile one markdown document.

    *root* defaults to ``settings.compiler.root`` and only affects
    ``relative_path``; the cache is keyed by *src* alone.
    """
    relative_path = to_relative_path(file, root or state.settings.compiler.root)
    log = structlog.get_logger().bind(relative_path=relative_path)

    cached = state.cache.get(src)
    if cached is not None:
        log.debug("cache_hit")
        return cached

    start = time.perf_counter()

    parsed = await state.frontmatter.extract(src)
    rendered = await state.renderer.render(parsed.body)
    html = escape_template_tokens(rendered.html)

    page_data = build_page_data(
        frontmatter=parsed.metadata,
        body=parsed.body,
        rendered=rendered,
        html_content=html,
        relative_path=relative_path,
        last_updated=await state.file_stat.modified_time_ms(file),
    )

    if rendered.data.demo_source is not None:
        component_source = await generate_demo_component(
            rendered.data.demo_source,
            rendered.data.headers,
            page_data,
            state,
        )
    else:
        component_source = plain_component(page_data, parsed.body)

    result = CompileResult(component_source=component_source.strip(), page_data=page_data)
    state.cache.set(src, result)

    log.debug("compile_complete", duration_ms=round((time.perf_counter() - start) * 1000, 2))
    return result
