"""pilotwatch monitor — pure read-only projection plus refresh scheduling.

The monitor NEVER maintains its own state.  Every pass re-reads STATE.md and
ralph.log.  It is a projection, not a source of truth.

Modules
-------
projection
    ``DashboardProjection`` reads both artifacts and produces a frozen
    ``DashboardSnapshot``.
renderer
    ``DashboardRenderer`` turns ``DashboardSnapshot`` into Rich renderables.
watchers
    ``ArtifactEventHandler`` bridges watchdog events to controller triggers.
controller
    ``RefreshController`` runs one pass per file-change notification or
    timer tick, and owns the watch handles.
"""

from pilotwatch.monitor.controller import (
    ControllerState,
    ControllerStateError,
    RefreshController,
    Trigger,
)
from pilotwatch.monitor.projection import DashboardProjection
from pilotwatch.monitor.renderer import DashboardRenderer

__all__ = [
    "ControllerState",
    "ControllerStateError",
    "DashboardProjection",
    "DashboardRenderer",
    "RefreshController",
    "Trigger",
]
