"""Structural splitting of Vue single-file component source.

Every part is optional. A missing part is ``None`` on ``SfcParts`` and
contributes an empty string wherever the part is emitted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

PartName = Literal["template", "script", "style", "script_content"]

_SCRIPT_RE = re.compile(r"<script\b[^>]*>([\s\S]*?)</script>")
_STYLE_RE = re.compile(r"<style\b[^>]*>[\s\S]*?</style>")
# Greedy: nested <template> tags stay inside the outermost one.
_TEMPLATE_RE = re.compile(r"<template\b[^>]*>[\s\S]*</template>")
_TEMPLATE_OPEN_RE = re.compile(r"<template\b")


@dataclass(frozen=True)
class SfcParts:
    template: str | None = None
    script: str | None = None  # Full <script ...>...</script> block
    style: str | None = None  # Full <style ...>...</style> block
    script_content: str | None = None  # Text between the script tags

    def text(self, name: PartName) -> str:
        """Return the part, or ``""`` when it is absent."""
        return getattr(self, name) or ""


def fetch_style(source: str) -> str | None:
    match = _STYLE_RE.search(source)
    return match.group(0) if match else None


def split_sfc(source: str) -> SfcParts:
    """Split component source into template, script and style blocks."""
    script_match = _SCRIPT_RE.search(source)
    style = fetch_style(source)

    # Search for the template outside script/style so that template strings
    # inside a script cannot be mistaken for the outer block.
    remainder = _STYLE_RE.sub("", _SCRIPT_RE.sub("", source))
    template_match = _TEMPLATE_RE.search(remainder)

    return SfcParts(
        template=template_match.group(0) if template_match else None,
        script=script_match.group(0) if script_match else None,
        style=style,
        script_content=script_match.group(1) if script_match else None,
    )


def as_default_slot(template: str) -> str:
    """Rewrite the outermost ``<template`` tag to target the default slot."""
    return _TEMPLATE_OPEN_RE.sub("<template v-slot:default", template, count=1)
