"""Unit tests for configuration defaults and overrides."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from mdtovue.config import CacheSettings, CompilerSettings, Settings


class TestDefaults:
    def test_cache_capacity(self) -> None:
        assert CacheSettings().max_entries == 1024

    def test_compiler_defaults(self) -> None:
        compiler = CompilerSettings()
        assert compiler.root == os.getcwd()
        assert compiler.demo_language == "vue"
        assert compiler.demo_component == "demo-box"
        assert compiler.locale_titles.cn == "zh-CN"
        assert compiler.locale_titles.us == "en-US"

    def test_transpiler_command(self) -> None:
        assert Settings().transpiler.command[0] == "esbuild"


class TestOverrides:
    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDTOVUE__CACHE__MAX_ENTRIES", "16")
        monkeypatch.setenv("MDTOVUE__COMPILER__ROOT", "/site/docs")
        settings = Settings()
        assert settings.cache.max_entries == 16
        assert settings.compiler.root == "/site/docs"

    def test_init_args_win_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDTOVUE__CACHE__MAX_ENTRIES", "16")
        assert Settings(cache={"max_entries": 8}).cache.max_entries == 8

    def test_capacity_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(max_entries=0)
