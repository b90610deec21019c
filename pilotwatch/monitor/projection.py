"""DashboardProjection — pure read-only view over the autopilot's artifacts.

The dashboard is a PROJECTION of STATE.md and ralph.log.  It does not keep
state of its own: every call re-reads both files and re-parses them from
scratch.  Problems with one artifact never prevent the other from being read.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pilotwatch.models.dashboard import (
    ArtifactStatus,
    DashboardSnapshot,
    LogReading,
    StateReading,
)
from pilotwatch.parsing.log_parser import LogParser
from pilotwatch.parsing.state_parser import StateParser

logger = logging.getLogger(__name__)


def read_artifact(path: Path) -> str:
    """Read an artifact as UTF-8, replacing undecodable bytes."""
    return path.read_bytes().decode("utf-8", errors="replace")


class DashboardProjection:
    """Reads and parses both artifacts on every ``snapshot()`` call.

    Parameters
    ----------
    state_path:
        Path to the current-state document (STATE.md).
    log_path:
        Path to the iteration log (ralph.log).
    recent_limit:
        How many trailing log entries the dashboard shows.
    """

    def __init__(
        self,
        state_path: Path,
        log_path: Path,
        *,
        recent_limit: int = 5,
        state_parser: StateParser | None = None,
        log_parser: LogParser | None = None,
    ) -> None:
        self.state_path = Path(state_path)
        self.log_path = Path(log_path)
        self.recent_limit = recent_limit
        self._state_parser = state_parser or StateParser()
        self._log_parser = log_parser or LogParser()

    def snapshot(self) -> DashboardSnapshot:
        """Produce a fresh snapshot of both artifacts.  Never raises for
        missing or unreadable files."""
        return DashboardSnapshot(
            state=self.read_state(),
            log=self.read_log(),
            recent_limit=self.recent_limit,
        )

    def read_state(self) -> StateReading:
        path = self.state_path
        try:
            text = read_artifact(path)
        except FileNotFoundError:
            return StateReading(path=path, status=ArtifactStatus.MISSING)
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return StateReading(
                path=path, status=ArtifactStatus.UNREADABLE, error=str(exc)
            )
        return StateReading(
            path=path,
            status=ArtifactStatus.PRESENT,
            snapshot=self._state_parser.parse(text),
        )

    def read_log(self) -> LogReading:
        path = self.log_path
        try:
            text = read_artifact(path)
        except FileNotFoundError:
            return LogReading(path=path, status=ArtifactStatus.MISSING)
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return LogReading(
                path=path, status=ArtifactStatus.UNREADABLE, error=str(exc)
            )
        return LogReading(
            path=path,
            status=ArtifactStatus.PRESENT,
            entries=self._log_parser.parse(text),
        )
