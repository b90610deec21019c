"""pilotwatch: live terminal dashboard for autopilot task loops.

Observes the two artifacts an autopilot run leaves behind (the current-state
document STATE.md and the iteration log ralph.log) and redraws a summary
whenever either changes, or every few seconds otherwise.  Pure file watching:
no API calls, no state of its own.
"""

__version__ = "0.1.0"
__description__ = "Live terminal progress dashboard for autopilot task loops"

from pilotwatch.models.dashboard import DashboardSnapshot
from pilotwatch.models.progress import LogEntry, StateSnapshot
from pilotwatch.monitor.controller import RefreshController
from pilotwatch.monitor.projection import DashboardProjection
from pilotwatch.parsing.log_parser import LogParser, parse_log
from pilotwatch.parsing.state_parser import StateParser, parse_state

__all__ = [
    "DashboardProjection",
    "DashboardSnapshot",
    "LogEntry",
    "LogParser",
    "RefreshController",
    "StateParser",
    "StateSnapshot",
    "parse_log",
    "parse_state",
    "__version__",
]
