"""Checklist line recognition: ``- [<marker>] <content>``."""

from __future__ import annotations

import re
from dataclasses import dataclass

OPEN_MARKER = " "
MIGRATED_MARKER = ">"

# Leading whitespace carries nesting depth; content may be empty ("- [ ]")
TASK_LINE_RE = re.compile(r"^(\s*)- \[(.)\](?: (.*))?$")

# Checkbox after any list bullet the outline index recognises ("* [ ]", "1. [ ]")
_BULLET_CHECKBOX_RE = re.compile(r"^[ \t]*(?:[-*+]|\d+[.)])[ \t]+\[(.)\]")


@dataclass(frozen=True)
class TaskLine:
    indent: str
    marker: str
    content: str

    @property
    def is_open(self) -> bool:
        return self.marker == OPEN_MARKER

    @property
    def is_migrated(self) -> bool:
        return self.marker == MIGRATED_MARKER


def parse_task_line(line: str) -> TaskLine | None:
    match = TASK_LINE_RE.match(line)
    if not match:
        return None
    return TaskLine(indent=match.group(1), marker=match.group(2), content=match.group(3) or "")


def set_marker(line: str, marker: str) -> str:
    """Replace the checkbox marker of a task line; other lines are returned unchanged."""
    match = _BULLET_CHECKBOX_RE.match(line)
    if not match:
        return line
    pos = match.start(1)
    return line[:pos] + marker + line[pos + 1 :]


def mark_migrated(line: str) -> str:
    return set_marker(line, MIGRATED_MARKER)
