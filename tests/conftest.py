"""Shared test fixtures for the mdtovue test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from mdtovue.config import Settings
from mdtovue.models import CompileResult, PageData


@pytest.fixture()
def settings() -> Settings:
    """Settings rooted at /docs, independent of any local mdtovue.yaml."""
    return Settings(compiler={"root": "/docs"})


@pytest.fixture()
def make_result() -> Callable[..., CompileResult]:
    """Factory for minimal CompileResults."""

    def _make(relative_path: str = "guide/intro.md", title: str = "Intro") -> CompileResult:
        return CompileResult(
            component_source='<template><article class="markdown"></article></template>',
            page_data=PageData(
                title=title,
                description="",
                relative_path=relative_path,
                content="",
                html="",
                last_updated=0,
            ),
        )

    return _make
