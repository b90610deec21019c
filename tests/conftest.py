"""Shared test fixtures for pilotwatch."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pilotwatch.monitor.projection import DashboardProjection


class FakeObserver:
    """Stands in for ``watchdog.observers.Observer`` without touching inotify."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[Any, str]] = []
        self.removed: list[tuple[Any, Any]] = []
        self.started = False
        self.stopped = False
        self.joined = False

    def schedule(self, handler: Any, path: str, recursive: bool = False) -> Any:
        watch = ("watch", path, len(self.scheduled))
        self.scheduled.append((handler, path))
        return watch

    def remove_handler_for_watch(self, handler: Any, watch: Any) -> None:
        self.removed.append((handler, watch))

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def join(self, timeout: float | None = None) -> None:
        self.joined = True


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project root with an (empty) .planning directory."""
    (tmp_path / ".planning").mkdir()
    return tmp_path


@pytest.fixture
def state_path(project_root: Path) -> Path:
    return project_root / ".planning" / "STATE.md"


@pytest.fixture
def log_path(project_root: Path) -> Path:
    return project_root / ".planning" / "ralph.log"


@pytest.fixture
def projection(state_path: Path, log_path: Path) -> DashboardProjection:
    return DashboardProjection(state_path, log_path)


@pytest.fixture
def fake_observer() -> FakeObserver:
    return FakeObserver()


@pytest.fixture
def make_log_text() -> Callable[..., str]:
    """Factory fixture: build ralph.log text with *count* well-formed entries."""

    def _factory(count: int, start: int = 1, status: str = "SUCCESS") -> str:
        blocks = []
        for n in range(start, start + count):
            blocks.append(
                f"Iteration: {n}\n"
                f"Timestamp: 2026-01-01T00:0{n % 10}:00Z\n"
                f"Task: task-{n}\n"
                f"Status: {status}\n"
                f"Duration: {n}s\n"
                f"Summary: did thing {n}\n"
                "---\n"
            )
        return "".join(blocks)

    return _factory
