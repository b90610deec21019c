"""LogParser — turns ralph.log text into an ordered list of ``LogEntry``.

The log is a sequence of label-prefixed blocks separated by lines that
contain exactly ``---``.  Blocks may be half-written while the autopilot is
appending, so anything that does not look like an entry is dropped silently.
"""

from __future__ import annotations

import re

from pilotwatch.models.progress import LogEntry
from pilotwatch.parsing.fields import LabelTable, extract_fields, split_lines

LOG_LABELS: LabelTable = {
    "Iteration:": "iteration",
    "Timestamp:": "timestamp",
    "Task:": "task",
    "Status:": "status",
    "Duration:": "duration",
    "Summary:": "summary",
}

BLOCK_SEPARATOR = re.compile(r"^---\r?$", re.MULTILINE)


class LogParser:
    """Parses the iteration log into entries, in source order.

    A block produces an entry only if its ``Iteration:`` value is non-empty.
    """

    def __init__(self, labels: LabelTable | None = None) -> None:
        self._labels = labels or LOG_LABELS

    def split_blocks(self, text: str) -> list[str]:
        """Split on separator lines, dropping whitespace-only blocks."""
        return [block for block in BLOCK_SEPARATOR.split(text) if block.strip()]

    def parse(self, text: str) -> list[LogEntry]:
        entries: list[LogEntry] = []
        for block in self.split_blocks(text):
            fields = extract_fields(split_lines(block), self._labels)
            if not fields.get("iteration"):
                continue
            entries.append(LogEntry(**fields))
        return entries


def parse_log(text: str) -> list[LogEntry]:
    """Parse ralph.log text with the default label table."""
    return LogParser().parse(text)
