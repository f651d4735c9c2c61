"""Converter settings and their optional YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .text import DEFAULT_IMAGE_PREFIX


class ConverterSettings(BaseModel):
    """Options for discovering posts and shaping the export."""

    posts_dir: str = Field(
        "source/_posts",
        description="Posts directory relative to the Octopress root.",
    )
    pattern: str = Field(
        "**/*.markdown", description="Glob used to find post files in posts_dir."
    )
    output: str = Field("GhostData.json", description="Default export file path.")
    image_prefix: str = Field(
        DEFAULT_IMAGE_PREFIX,
        description="Prefix prepended to image paths converted from {% img %} tags.",
    )
    timezone: str = Field(
        "UTC", description="IANA zone used for dates without an explicit offset."
    )
    indent: Optional[int] = Field(
        2, ge=0, description="JSON indent for the export file; null writes compact JSON."
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {value}") from exc
        return value

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def load_settings(path: Optional[Path] = None, **overrides: Any) -> ConverterSettings:
    """Load settings from a YAML file, then apply non-None overrides."""

    data: dict[str, Any] = {}
    if path is not None:
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping.")
        data.update(loaded)

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ConverterSettings.model_validate(data)
    except ValidationError as exc:
        source = path if path is not None else "settings"
        raise ConfigurationError(f"Invalid settings in {source}: {exc}") from exc


__all__ = ["ConverterSettings", "load_settings"]
