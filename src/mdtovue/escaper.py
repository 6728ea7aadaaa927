"""Neutralise token sequences that the host build tool rewrites in place.

``import.meta`` and ``process.env`` inside rendered HTML would be replaced by
the bundler. A ``<wbr/>`` between the two tokens renders identically but no
longer matches.
"""

from __future__ import annotations

RESERVED_TOKENS: tuple[tuple[str, str], ...] = (
    ("import.meta", "import.<wbr/>meta"),
    ("process.env", "process.<wbr/>env"),
)


def escape_template_tokens(html: str) -> str:
    """Break every reserved token sequence in *html*. Idempotent."""
    for token, replacement in RESERVED_TOKENS:
        html = html.replace(token, replacement)
    return html
