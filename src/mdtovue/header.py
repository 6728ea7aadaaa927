"""Header text sanitizer.

Turns heading and title strings into plain text by running them through a
fixed, ordered list of pure transforms. Two pipelines are exposed:

- ``parse_header`` (shallow): unescape entities, strip markdown tokens, trim.
- ``deeply_parse_header``: additionally removes raw HTML tags that are not
  wrapped in backticks, before the shallow steps.

Used for titles only, never for full document HTML.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

Step = Callable[[str], str]

_HTML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&#x3A;", ":"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)

_LINK_RE = re.compile(r"(\[(.[^\]]+)\]\((.[^)]+)\))")
# `{t}` | *{t}* | **{t}** | ***{t}*** | _{t}_
_EMPHASIS_RE = re.compile(r"(`|\*{1,3}|_)(.*?[^\\])\1")
_ESCAPED_PUNCT_RE = re.compile(r"\\([*_`!<$])")
# Boundary characters around the tag are captured and written back.
_RAW_HTML_RE = re.compile(r"(^|[^><`\\])<.*>([^><`]|\Z)")


def unescape_html(text: str) -> str:
    for entity, char in _HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def remove_markdown_tokens(text: str) -> str:
    text = _LINK_RE.sub(r"\2", text)
    text = _EMPHASIS_RE.sub(r"\2", text)
    return _ESCAPED_PUNCT_RE.sub(r"\1", text)


def trim(text: str) -> str:
    return text.strip()


def remove_non_code_wrapped_html(text: str) -> str:
    """Remove raw HTML but keep HTML wrapped in backticks.

    ``"<a> b"`` → ``" b"``; ``"`<a>` b"`` is returned unchanged.
    """
    return _RAW_HTML_RE.sub(r"\1\2", text)


SHALLOW_STEPS: tuple[Step, ...] = (unescape_html, remove_markdown_tokens, trim)
DEEP_STEPS: tuple[Step, ...] = (remove_non_code_wrapped_html, *SHALLOW_STEPS)


def apply_steps(text: str, steps: Iterable[Step]) -> str:
    for step in steps:
        text = step(text)
    return text


def parse_header(text: str) -> str:
    return apply_steps(str(text), SHALLOW_STEPS)


def deeply_parse_header(text: str) -> str:
    return apply_steps(str(text), DEEP_STEPS)
