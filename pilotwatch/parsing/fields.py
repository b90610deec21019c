"""Label table field extraction shared by the STATE.md and ralph.log parsers.

Both artifacts use the same line shape: a fixed, case-sensitive label at the
very start of the line, followed by a free-text value.  A parser is just a
table mapping each label to the model field it populates.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

# label -> model field name, checked in order
LabelTable = Mapping[str, str]


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing ``\\r`` is removed by the value strip."""
    return text.split("\n")


def extract_fields(lines: Iterable[str], labels: LabelTable) -> dict[str, str]:
    """Collect ``{field: value}`` for every line that starts with a known label.

    The value is everything after the label, stripped of surrounding
    whitespace.  When a label repeats, the last occurrence wins.  Lines that
    match no label are ignored.

    Examples
    --------
    >>> extract_fields(["Phase: 1", "noise", "Phase:  2 "], {"Phase:": "phase"})
    {'phase': '2'}
    """
    fields: dict[str, str] = {}
    for line in lines:
        for label, field_name in labels.items():
            if line.startswith(label):
                fields[field_name] = line[len(label):].strip()
                break
    return fields
