"""StateParser — turns STATE.md text into a ``StateSnapshot``."""

from __future__ import annotations

from pilotwatch.models.progress import StateSnapshot
from pilotwatch.parsing.fields import LabelTable, extract_fields, split_lines

STATE_LABELS: LabelTable = {
    "Phase:": "phase",
    "Plan:": "plan",
    "Status:": "status",
    "Last activity:": "last_activity",
    "Progress:": "progress",
}


class StateParser:
    """Parses the current-state document.

    Never fails: text with none of the labels yields an all-empty snapshot.
    """

    def __init__(self, labels: LabelTable | None = None) -> None:
        self._labels = labels or STATE_LABELS

    def parse(self, text: str) -> StateSnapshot:
        fields = extract_fields(split_lines(text), self._labels)
        return StateSnapshot(**fields)


def parse_state(text: str) -> StateSnapshot:
    """Parse STATE.md text with the default label table."""
    return StateParser().parse(text)
