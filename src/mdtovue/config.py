"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (MDTOVUE__CACHE__MAX_ENTRIES=2048)
  3. mdtovue.yaml           (searched in cwd, then platform config dir)
  4. Hardcoded defaults

The config file is optional; all fields have sensible defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CACHE_MAX_ENTRIES = 1024


def _find_config_file() -> str | None:
    """Return the path of the first mdtovue.yaml found, or None."""
    candidates = [
        Path("mdtovue.yaml"),
        Path(platformdirs.user_config_dir("mdtovue")) / "mdtovue.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class LocaleTitles(BaseModel):
    """Header titles whose section text becomes a demo caption."""

    cn: str = "zh-CN"
    us: str = "en-US"


class CompilerSettings(BaseModel):
    root: str = Field(default_factory=os.getcwd)
    demo_language: str = "vue"
    demo_component: str = "demo-box"
    locale_titles: LocaleTitles = LocaleTitles()


class CacheSettings(BaseModel):
    max_entries: int = Field(default=DEFAULT_CACHE_MAX_ENTRIES, ge=1)


class TranspilerSettings(BaseModel):
    command: list[str] = ["esbuild", "--loader=ts", "--log-level=error"]


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: MDTOVUE__COMPILER__ROOT=/docs
        env_prefix="MDTOVUE__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    compiler: CompilerSettings = CompilerSettings()
    cache: CacheSettings = CacheSettings()
    transpiler: TranspilerSettings = TranspilerSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
