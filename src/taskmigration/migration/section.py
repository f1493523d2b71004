"""Locate the line range owned by a heading."""

from __future__ import annotations

from dataclasses import dataclass

from taskmigration.vault.outline import Outline


@dataclass(frozen=True)
class TaskSection:
    """Inclusive line range under a heading; end_line None means end of document."""

    start_line: int
    end_line: int | None = None

    @property
    def heading_line(self) -> int:
        return self.start_line - 1

    def contains(self, line: int) -> bool:
        if line < self.start_line:
            return False
        return self.end_line is None or line <= self.end_line

    def is_empty(self) -> bool:
        return self.end_line is not None and self.end_line < self.start_line

    def resolve_end(self, line_count: int) -> int:
        """Last line of the section in a document with line_count lines."""
        last = line_count - 1
        if self.end_line is None:
            return last
        return min(self.end_line, last)


def find_task_section(outline: Outline | None, name: str, level: int) -> TaskSection | None:
    """Find the section under the first heading at `level` titled `name`.

    The section ends just before the next heading at the same level. Deeper
    headings stay inside it; shallower ones do not end it either. Returns None
    when there is no outline or no matching heading.
    """
    if outline is None or not outline.headings:
        return None

    target = next(
        (h for h in outline.headings if h.level == level and h.text == name),
        None,
    )
    if target is None:
        return None

    next_heading = next(
        (h for h in outline.headings if h.level == level and h.line > target.line),
        None,
    )
    end_line = next_heading.line - 1 if next_heading else None
    return TaskSection(start_line=target.line + 1, end_line=end_line)
