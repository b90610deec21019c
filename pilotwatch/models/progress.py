"""Value models parsed from the autopilot's STATE.md and ralph.log."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class IterationStatus(str, Enum):
    """Outcomes the dashboard knows how to highlight."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    RETRY = "RETRY"


class StateSnapshot(BaseModel):
    """Current position of the autopilot as read from STATE.md.

    Every field defaults to the empty string when its label is absent.
    A new snapshot replaces the previous one wholesale on every read.
    """

    model_config = ConfigDict(frozen=True)

    phase: str = ""
    plan: str = ""
    status: str = ""
    progress: str = ""
    last_activity: str = ""


class LogEntry(BaseModel):
    """One iteration record from ralph.log.

    Only materialized when its block carried a non-empty ``Iteration:``.
    """

    model_config = ConfigDict(frozen=True)

    iteration: str
    timestamp: str = ""
    task: str = ""
    status: str = ""
    duration: str | None = None
    summary: str | None = None

    @property
    def status_kind(self) -> IterationStatus | None:
        """Recognized status (case-insensitive), or None for other literals."""
        try:
            return IterationStatus(self.status.upper())
        except ValueError:
            return None
