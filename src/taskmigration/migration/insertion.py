"""Splice new lines into a section of a line buffer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from taskmigration.migration.section import TaskSection
from taskmigration.vault.outline import ListItemRecord


def _splice(lines: Sequence[str], index: int, new_lines: Sequence[str]) -> list[str]:
    index = max(0, min(index, len(lines)))
    return [*lines[:index], *new_lines, *lines[index:]]


def append_at_section_end(
    lines: Sequence[str], section: TaskSection, new_lines: Sequence[str]
) -> list[str]:
    """Insert after the last non-blank line of the section, ahead of trailing blank padding.

    The walk back never passes the heading line, so an empty section receives
    the lines right under its heading.
    """
    if not new_lines:
        return list(lines)

    insert_at = section.start_line
    for i in range(section.resolve_end(len(lines)), section.heading_line - 1, -1):
        if lines[i].strip():
            insert_at = i + 1
            break
    return _splice(lines, insert_at, new_lines)


def insert_after_last_task(
    lines: Sequence[str],
    section: TaskSection,
    records: Iterable[ListItemRecord],
    new_lines: Sequence[str],
) -> list[str]:
    """Insert after the last task in the section and everything nested under it.

    Falls back to the section start when the section holds no task.
    """
    if not new_lines:
        return list(lines)

    in_section = {r.line: r for r in records if section.contains(r.line)}
    task_lines = [line for line, r in in_section.items() if r.task is not None]
    if not task_lines:
        return _splice(lines, section.start_line, new_lines)

    last = max(task_lines)
    owned = {last}
    insert_at = last + 1
    end = section.resolve_end(len(lines))
    while insert_at <= end:
        record = in_section.get(insert_at)
        if record is not None:
            if record.parent_line not in owned:
                break
            owned.add(record.line)
        elif not lines[insert_at].strip() or not lines[insert_at][0].isspace():
            # Only indented continuation text stays with the item above it
            break
        insert_at += 1
    return _splice(lines, insert_at, new_lines)
