"""Configuration loading and validation for sliding windows."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import InvalidArgumentError
from .window import DEFAULT_CAPACITY

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SECTION_KEY = "sliding_window"


class WindowSettings(BaseModel):
    """Construction and logging settings for windows and window buffers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initial_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1, strict=True)
    window_size: Optional[int] = Field(default=None, ge=1, strict=True)
    step_size: Optional[int] = Field(default=None, ge=1, strict=True)
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def validate_settings(config: Mapping[str, Any]) -> WindowSettings:
    """Validate a settings mapping.

    Pydantic validation errors are re-raised as ``InvalidArgumentError`` so
    callers only have to handle the package's own exception types.
    """

    if not isinstance(config, Mapping):
        raise InvalidArgumentError("Settings must be a mapping/object")
    try:
        return WindowSettings(**dict(config))
    except ValidationError as exc:
        raise InvalidArgumentError(str(exc)) from exc


def load_window_settings(path: str | Path) -> WindowSettings:
    """Load window settings from a YAML or JSON file.

    The file may hold the settings at the top level or under a
    ``sliding_window:`` section.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            loaded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidArgumentError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidArgumentError(f"Invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise InvalidArgumentError(f"Config file {path} must contain a mapping/object")

    section = loaded.get(SECTION_KEY)
    if isinstance(section, dict):
        loaded = section
    return validate_settings(loaded)
