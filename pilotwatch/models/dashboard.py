"""Models describing the outcome of a single refresh pass.

A pass reads both artifacts and records, per artifact, whether it was
present, missing or unreadable.  These models are never persisted — they are
computed fresh by ``DashboardProjection.snapshot()`` and discarded after the
render.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pilotwatch.models.progress import LogEntry, StateSnapshot


class ArtifactStatus(str, Enum):
    """How a watched file looked at read time."""

    PRESENT = "present"
    MISSING = "missing"
    UNREADABLE = "unreadable"


class StateReading(BaseModel):
    """Result of reading STATE.md during one pass."""

    model_config = ConfigDict(frozen=True)

    path: Path
    status: ArtifactStatus
    snapshot: StateSnapshot | None = None
    error: str | None = None


class LogReading(BaseModel):
    """Result of reading ralph.log during one pass."""

    model_config = ConfigDict(frozen=True)

    path: Path
    status: ArtifactStatus
    entries: list[LogEntry] = []
    error: str | None = None

    def recent(self, limit: int) -> list[LogEntry]:
        """Return at most the last *limit* entries, in original order."""
        if limit <= 0:
            return []
        return list(self.entries[-limit:])


class DashboardSnapshot(BaseModel):
    """Everything one render needs: both readings plus the capture time."""

    model_config = ConfigDict(frozen=True)

    state: StateReading
    log: LogReading
    recent_limit: int = 5
    captured_at: datetime = Field(default_factory=datetime.now)

    @property
    def recent_entries(self) -> list[LogEntry]:
        """The tail of the log that the dashboard displays."""
        return self.log.recent(self.recent_limit)
