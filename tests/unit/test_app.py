"""Unit tests for process wiring: structlog setup and CompilerState defaults."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
import structlog

from mdtovue.app import build_state, setup_logging
from mdtovue.cache import CompileCache
from mdtovue.config import Settings
from mdtovue.filestat import OsFileStat
from mdtovue.frontmatter import YamlFrontmatter
from mdtovue.renderer import MarkdownItRenderer
from mdtovue.transpiler import SubprocessTranspiler


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_lines_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(Settings(logging={"format": "json", "level": "DEBUG"}))
        structlog.get_logger().debug("cache_hit", relative_path="guide/intro.md")

        captured = capsys.readouterr()
        assert captured.out == ""
        line = json.loads(captured.err.strip())
        assert line["event"] == "cache_hit"
        assert line["level"] == "debug"
        assert line["relative_path"] == "guide/intro.md"
        assert "timestamp" in line

    def test_level_filters_lower_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(Settings(logging={"format": "json", "level": "WARNING"}))
        log = structlog.get_logger()
        log.info("compile_complete")
        log.warning("transpile_failed", returncode=2)

        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        assert [line["event"] for line in lines] == ["transpile_failed"]

    def test_text_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(Settings(logging={"format": "text", "level": "INFO"}))
        structlog.get_logger().info("demo_generated")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "demo_generated" in captured.err


class TestBuildState:
    def test_default_adapters(self, settings: Settings) -> None:
        state = build_state(settings)
        assert state.settings is settings
        assert isinstance(state.cache, CompileCache)
        assert isinstance(state.frontmatter, YamlFrontmatter)
        assert isinstance(state.renderer, MarkdownItRenderer)
        assert isinstance(state.transpiler, SubprocessTranspiler)
        assert isinstance(state.file_stat, OsFileStat)

    def test_empty_cache_override_kept(self, settings: Settings) -> None:
        cache = CompileCache(4)
        assert build_state(settings, cache=cache).cache is cache
