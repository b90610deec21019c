"""RefreshController — decides when the dashboard is re-derived and redrawn.

Lifecycle::

    IDLE --start()--> WATCHING --stop()--> SHUTTING_DOWN --> STOPPED

Triggers come from three places: a file-change notification for STATE.md,
one for ralph.log, and the periodic timer.  Every trigger causes exactly one
pass (read both artifacts, parse, render).  Bursts of notifications are not
debounced; each one produces its own pass.

Passes only ever run on the thread that calls ``run()``.  The watchdog
observer thread merely enqueues triggers, so two passes never interleave.
Shutdown is requested through a ``threading.Event`` token that the loop
polls, which keeps signal handling out of the controller.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from watchdog.observers import Observer

from pilotwatch.models.dashboard import DashboardSnapshot
from pilotwatch.monitor.projection import DashboardProjection
from pilotwatch.monitor.watchers import ArtifactEventHandler

logger = logging.getLogger(__name__)

# Upper bound on how long the loop sleeps before re-checking the shutdown token
_WAKE_INTERVAL = 0.2


class ControllerState(str, Enum):
    """Lifecycle stage of a RefreshController."""

    IDLE = "idle"
    WATCHING = "watching"
    SHUTTING_DOWN = "shutting_down"
    STOPPED = "stopped"


class Trigger(str, Enum):
    """Why a pass ran."""

    STARTUP = "startup"
    STATE_CHANGED = "state_changed"
    LOG_CHANGED = "log_changed"
    TICK = "tick"


class ControllerStateError(RuntimeError):
    """Raised when a lifecycle method is called in the wrong state."""


class _ArtifactWatch:
    """One watch handle: a handler registered on an artifact's directory."""

    def __init__(self, handler: ArtifactEventHandler, watch: Any) -> None:
        self.handler = handler
        self.watch = watch


class RefreshController:
    """Owns the watch handles and timer, and runs one pass per trigger.

    Parameters
    ----------
    projection:
        Produces a fresh ``DashboardSnapshot`` from both artifacts.
    display:
        Called once per pass with the new snapshot (usually
        ``DashboardRenderer.show``).
    interval:
        Seconds between timer-driven passes.
    observer_factory:
        Builds the watchdog observer.  Tests pass a fake.
    shutdown:
        Cancellation token.  A new ``threading.Event`` if not provided.
    clock:
        Monotonic clock used for the periodic timer.
    """

    def __init__(
        self,
        projection: DashboardProjection,
        display: Callable[[DashboardSnapshot], object],
        *,
        interval: float = 10.0,
        observer_factory: Callable[[], Any] = Observer,
        shutdown: threading.Event | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self._projection = projection
        self._display = display
        self.interval = interval
        self._observer_factory = observer_factory
        self._shutdown = shutdown if shutdown is not None else threading.Event()
        self._clock = clock

        self._triggers: queue.Queue[Trigger] = queue.Queue()
        self._observer: Any = None
        self._state_watch: _ArtifactWatch | None = None
        self._log_watch: _ArtifactWatch | None = None
        self._next_tick: float = 0.0

        self.state = ControllerState.IDLE
        self.pass_count = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Render once, register watches, arm the timer."""
        if self.state is not ControllerState.IDLE:
            raise ControllerStateError(f"cannot start from state {self.state.value}")

        self.process(Trigger.STARTUP)

        self._observer = self._observer_factory()
        self._state_watch = self._register(
            self._projection.state_path, Trigger.STATE_CHANGED
        )
        self._log_watch = self._register(
            self._projection.log_path, Trigger.LOG_CHANGED
        )
        self._observer.start()

        self._next_tick = self._clock() + self.interval
        self.state = ControllerState.WATCHING
        logger.info("Watching %s and %s", self._projection.state_path, self._projection.log_path)

    def _register(self, path: Path, trigger: Trigger) -> _ArtifactWatch | None:
        directory = path.parent
        if not directory.is_dir():
            logger.warning("Directory %s does not exist; not watching %s", directory, path.name)
            return None
        handler = ArtifactEventHandler(path.name, trigger, self.notify)
        watch = self._observer.schedule(handler, str(directory), recursive=False)
        logger.info("Watch registered for %s in %s", path.name, directory)
        return _ArtifactWatch(handler, watch)

    def stop(self) -> None:
        """Release both watch handles and the observer.  Idempotent."""
        if self.state is ControllerState.STOPPED:
            return
        self.state = ControllerState.SHUTTING_DOWN

        self._release(self._state_watch)
        self._state_watch = None
        self._release(self._log_watch)
        self._log_watch = None

        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=5.0)
            self._observer = None

        self.state = ControllerState.STOPPED
        logger.info("Progress watcher stopped after %d passes", self.pass_count)

    def _release(self, artifact_watch: _ArtifactWatch | None) -> None:
        if artifact_watch is None or self._observer is None:
            return
        self._observer.remove_handler_for_watch(
            artifact_watch.handler, artifact_watch.watch
        )

    @property
    def watch_count(self) -> int:
        """Number of watch handles currently registered."""
        return sum(1 for w in (self._state_watch, self._log_watch) if w is not None)

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def notify(self, trigger: Trigger) -> None:
        """Queue a trigger.  Safe to call from the observer thread."""
        self._triggers.put(trigger)

    def request_shutdown(self) -> None:
        """Ask the loop to stop.  Safe to call from a signal handler."""
        self._shutdown.set()

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown.is_set()

    def process(self, trigger: Trigger) -> DashboardSnapshot:
        """Run exactly one pass: re-read both artifacts and display them."""
        snapshot = self._projection.snapshot()
        self._display(snapshot)
        self.pass_count += 1
        logger.debug("Pass %d (%s)", self.pass_count, trigger.value)
        return snapshot

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Serve triggers until shutdown is requested, then stop."""
        if self.state is ControllerState.IDLE:
            self.start()
        try:
            while not self._shutdown.is_set():
                self._run_once()
        finally:
            self.stop()

    def _run_once(self) -> None:
        timeout = min(_WAKE_INTERVAL, max(0.0, self._next_tick - self._clock()))
        try:
            trigger = self._triggers.get(timeout=timeout)
        except queue.Empty:
            pass
        else:
            if self._shutdown.is_set():
                return
            self.process(trigger)

        if self._clock() >= self._next_tick and not self._shutdown.is_set():
            self._next_tick = self._clock() + self.interval
            self.process(Trigger.TICK)
