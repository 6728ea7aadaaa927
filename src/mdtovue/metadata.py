"""Page metadata derivation.

Pure business logic: receives the frontmatter map, the post-frontmatter body
and the renderer output, returns PageData. Title resolution is a strict
precedence chain: home flag, then explicit title, then first heading,
then the empty string.
"""

from __future__ import annotations

import html
import os
import re
from collections.abc import Mapping, Sequence
from typing import Any

from mdtovue.header import deeply_parse_header
from mdtovue.models import PageData, RenderOutput

_FIRST_HEADING_RE = re.compile(r"^\s*#+\s+(.*)", re.MULTILINE)


def infer_title(frontmatter: Mapping[str, Any], body: str) -> str:
    if frontmatter.get("home"):
        return "Home"

    title = frontmatter.get("title")
    if title:
        return deeply_parse_header(str(title))

    match = _FIRST_HEADING_RE.search(body)
    if match:
        return deeply_parse_header(match.group(1).strip())

    return ""


def get_head_meta_content(head: Sequence[Any] | None, name: str) -> str | None:
    """Return the ``content`` of the first ``meta`` head entry named *name*.

    Head entries have the shape ``[tag, attrs]``. Entries of any other shape,
    or whose attrs is not a mapping, are skipped.
    """
    if not head:
        return None

    if not isinstance(head, Sequence) or isinstance(head, str):
        return None

    for entry in head:
        if not entry or not isinstance(entry, Sequence) or isinstance(entry, str):
            continue
        tag = entry[0]
        attrs = entry[1] if len(entry) > 1 else None
        if not isinstance(attrs, Mapping):
            continue
        if tag == "meta" and attrs.get("name") == name and attrs.get("content"):
            return attrs["content"]
    return None


def infer_description(frontmatter: Mapping[str, Any]) -> str:
    head = frontmatter.get("head")
    if not head:
        return ""
    return get_head_meta_content(head, "description") or ""


def to_relative_path(file: str, root: str) -> str:
    """Path of *file* relative to *root* with forward-slash separators."""
    return os.path.relpath(file, root).replace("\\", "/")


def build_page_data(
    *,
    frontmatter: dict[str, Any],
    body: str,
    rendered: RenderOutput,
    html_content: str,
    relative_path: str,
    last_updated: int,
) -> PageData:
    """Assemble PageData.

    *html_content* is the already-escaped rendered HTML; ``content`` is always
    the HTML-escaped markdown body, whether or not a demo is generated later.
    """
    return PageData(
        title=infer_title(frontmatter, body),
        description=infer_description(frontmatter),
        frontmatter=frontmatter,
        headers=rendered.data.headers,
        relative_path=relative_path,
        content=html.escape(body),
        html=html_content,
        last_updated=last_updated,
    )
