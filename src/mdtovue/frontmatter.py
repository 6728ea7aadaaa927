"""YAML frontmatter extraction.

A frontmatter block is a YAML mapping between two ``---`` lines at the very
top of the document. Documents without one yield empty metadata and the
source unchanged as body.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from mdtovue.errors import FrontmatterError
from mdtovue.models import FrontmatterResult

_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


def split_frontmatter(source: str) -> tuple[str | None, str]:
    """Return ``(yaml_text, body)``; ``yaml_text`` is None without a block."""
    match = _FRONTMATTER_RE.match(source)
    if match is None:
        return None, source
    return match.group(1) or "", source[match.end() :]


class YamlFrontmatter:
    """FrontmatterProtocol implementation using PyYAML ``safe_load``."""

    async def extract(self, source: str) -> FrontmatterResult:
        yaml_text, body = split_frontmatter(source)
        if yaml_text is None:
            return FrontmatterResult(body=body, metadata={})

        try:
            metadata = yaml.safe_load(yaml_text)
        except yaml.YAMLError as exc:
            raise FrontmatterError(f"Invalid YAML frontmatter: {exc}") from exc

        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise FrontmatterError(
                f"Frontmatter must be a mapping, got {type(metadata).__name__}"
            )
        return FrontmatterResult(body=body, metadata=_string_keys(metadata))


def _key(key: Any) -> str:
    # Spelled the way a JSON object key would be
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _string_keys(value: Any) -> Any:
    """Coerce mapping keys to strings at every depth (``2024:``, ``on:``, dates)."""
    if isinstance(value, dict):
        return {_key(k): _string_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value
