"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (RUST_INTEROP__ROTATION__INTERVAL_MS=5000)
  2. rust-interop.yaml      (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_CONFIG_FILENAME = "rust-interop.yaml"
_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("rust-interop")


def _find_config_file() -> str | None:
    """Return the path of the first rust-interop.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILENAME),
        Path(_DEFAULT_CONFIG_DIR) / _CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ContentSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    directory: str = "content"
    strict: bool = False


class RotationSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    interval_ms: int = 3000

    @field_validator("interval_ms")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("interval_ms must be > 0")
        return v


class LinkSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    crates_base_url: str = "https://crates.io/crates"
    badge_base_url: str = "http://meritbadge.herokuapp.com"


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: RUST_INTEROP__CONTENT__STRICT=true
        env_prefix="RUST_INTEROP__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    content: ContentSettings = ContentSettings()
    rotation: RotationSettings = RotationSettings()
    links: LinkSettings = LinkSettings()
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
