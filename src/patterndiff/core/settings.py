"""Settings for patterndiff.

Configuration is environment-driven and validated at startup through
pydantic-settings. Every field can be overridden with a ``PATTERNDIFF_``
prefixed environment variable or a ``.env`` file in the working directory.

Fields
──────
log_level          : structlog level (DEBUG, INFO, WARNING, ERROR)
json_logs          : force JSON (true) / console (false) logs; unset = auto
default_language   : language tag used when a snippet does not name one
highlight_theme    : Pygments style name used for highlighted fragments
highlight_timeout  : seconds before an async highlight falls back; unset = none
output_dir         : where ``patterndiff build`` writes the static site
site_title         : page title prefix

Examples:
    >>> from patterndiff.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.highlight_theme
    'github-dark'
"""

from __future__ import annotations

from pathlib import Path

import pydantic
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from patterndiff.core.errors import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PatternDiffSettings(BaseSettings):
    """Settings shared by the store, the highlight adapter and the site builder."""

    model_config = SettingsConfigDict(
        env_prefix="PATTERNDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Highlighting ─────────────────────────────────────────────
    default_language: str = "typescript"
    highlight_theme: str = "github-dark"
    highlight_timeout: float | None = Field(default=None, gt=0)

    # ── Site ─────────────────────────────────────────────────────
    output_dir: Path = Field(
        default_factory=lambda: Path("site"),
        description="Directory the static site is written to",
    )
    site_title: str = "Next.js Pattern Examples"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


_settings: PatternDiffSettings | None = None


def get_settings(*, _force_reload: bool = False) -> PatternDiffSettings:
    """Load, validate, and cache the process-wide settings.

    Raises:
        ConfigError: if an environment override fails validation.
    """
    global _settings
    if _settings is None or _force_reload:
        try:
            _settings = PatternDiffSettings()
        except pydantic.ValidationError as exc:
            raise ConfigError(f"Invalid patterndiff settings: {exc}", cause=exc) from exc
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (used by tests)."""
    global _settings
    _settings = None


__all__ = ["PatternDiffSettings", "get_settings", "reset_settings"]
