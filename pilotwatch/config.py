"""Watcher configuration — env-driven.

Centralized config using pydantic-settings.  Reads from a .env file and
PILOTWATCH_* environment variables.  The conventional ``NO_COLOR`` variable
is honoured without the prefix.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WatcherConfig(BaseSettings):
    """Runtime configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export PILOTWATCH_REFRESH_INTERVAL=5
        export PILOTWATCH_LOG_LEVEL=DEBUG
        export NO_COLOR=1
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PILOTWATCH_",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Refresh cadence without file activity, in seconds
    refresh_interval: float = 10.0
    recent_iterations: int = 5

    # Artifact locations, relative to the project root
    state_file: Path = Path(".planning/STATE.md")
    log_file: Path = Path(".planning/ralph.log")

    log_level: str = "WARNING"

    no_color: str | None = Field(default=None, validation_alias="NO_COLOR")

    @property
    def color_disabled(self) -> bool:
        """Whether styling is suppressed (any non-empty ``NO_COLOR``)."""
        return bool(self.no_color)


# Module-level singleton — import as `from pilotwatch.config import config`
config = WatcherConfig()
