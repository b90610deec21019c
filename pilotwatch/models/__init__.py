"""pilotwatch data models — all Pydantic v2, all frozen (immutable)."""

from pilotwatch.models.dashboard import (
    ArtifactStatus,
    DashboardSnapshot,
    LogReading,
    StateReading,
)
from pilotwatch.models.progress import IterationStatus, LogEntry, StateSnapshot

__all__ = [
    # progress
    "IterationStatus",
    "StateSnapshot",
    "LogEntry",
    # dashboard
    "ArtifactStatus",
    "StateReading",
    "LogReading",
    "DashboardSnapshot",
]
