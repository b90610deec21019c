"""watchdog adapter — turns directory events into controller triggers.

Each watched artifact gets its own handler registered on the artifact's
parent directory.  The handler runs on the observer thread and does nothing
but hand a trigger to the controller's queue.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any

from watchdog.events import (
    EVENT_TYPE_CLOSED,
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)

logger = logging.getLogger(__name__)

# Opened / read-only close events are excluded: the dashboard's own reads
# would otherwise trigger endless passes.
CHANGE_EVENT_TYPES = frozenset(
    {
        EVENT_TYPE_CREATED,
        EVENT_TYPE_MODIFIED,
        EVENT_TYPE_MOVED,
        EVENT_TYPE_DELETED,
        EVENT_TYPE_CLOSED,
    }
)


def _basename(path: str | bytes) -> str:
    return os.path.basename(os.fsdecode(path)) if path else ""


class ArtifactEventHandler(FileSystemEventHandler):
    """Forwards change events naming *filename* as *trigger*.

    Parameters
    ----------
    filename:
        Basename of the watched artifact, e.g. ``STATE.md``.
    trigger:
        Value passed to *notify* for every matching event.
    notify:
        Thread-safe callback, normally ``RefreshController.notify``.
    """

    def __init__(
        self, filename: str, trigger: Any, notify: Callable[[Any], None]
    ) -> None:
        super().__init__()
        self.filename = filename
        self.trigger = trigger
        self._notify = notify

    def matches(self, event: FileSystemEvent) -> bool:
        if event.is_directory or event.event_type not in CHANGE_EVENT_TYPES:
            return False
        names = {_basename(event.src_path), _basename(getattr(event, "dest_path", ""))}
        return self.filename in names

    def on_any_event(self, event: FileSystemEvent) -> None:
        if self.matches(event):
            logger.debug("%s event for %s", event.event_type, self.filename)
            self._notify(self.trigger)
