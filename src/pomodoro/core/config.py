"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read configuration the same way.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pomodoro.core.domain.models import VarietyThresholds
from pomodoro.core.varieties import DEFAULT_VARIETIES


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pomodoro"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pomodoro"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pomodoro"
    return Path.home() / ".config" / "pomodoro"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class PomodoroSettings(BaseSettings):
    """Central application settings.

    Readings set here are what `SettingsConditions` reports when no conditions
    file is configured.
    """

    model_config = SettingsConfigDict(
        env_prefix="POMODORO_",
        extra="ignore",
        case_sensitive=False,
        # Project first, then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    water: float = Field(default=0.0, description="Water reading.")
    soil: float = Field(default=0.0, description="Soil reading.")
    seed: float = Field(default=0.0, description="Seed reading.")

    conditions_file: Path | None = Field(
        default=None,
        description="JSON document with water/soil/seed readings, re-read on every access.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the `pomodoro` logger (DEBUG, INFO, WARNING, ERROR).",
    )
    variety_thresholds: dict[str, VarietyThresholds] = Field(
        default_factory=dict,
        description="Per-variety bound overrides, keyed by variety name (JSON in env).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("variety_thresholds")
    @classmethod
    def _known_varieties(cls, value: dict[str, VarietyThresholds]) -> dict[str, VarietyThresholds]:
        unknown = sorted(name for name in value if name not in DEFAULT_VARIETIES)
        if unknown:
            raise ValueError(f"thresholds given for unknown varieties: {', '.join(unknown)}")
        return value
