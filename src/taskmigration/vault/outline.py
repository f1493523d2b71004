"""Outline index for markdown notes: headings and list items with parent lines.

Line numbers are 0-based positions in the raw note text (frontmatter included),
so they can be used directly against ``split_lines(text)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import frontmatter

# Parent sentinel for list items that sit at the top of their list
TOP_LEVEL = -1

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

# Match "## Heading" and strip an optional closing sequence ("## Heading ##")
_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$")

# Match "- item", "* item", "+ item", "1. item", "1) item"
_LIST_ITEM_RE = re.compile(r"^([ \t]*)(?:[-*+]|\d+[.)])[ \t]+(.*)$")

# Match a checkbox at the start of a list item's text: "[ ] ", "[x] ", "[>]"
_CHECKBOX_RE = re.compile(r"^\[(.)\](?:[ \t]|$)")

_FENCE_RE = re.compile(r"^[ \t]*(```|~~~)")


@dataclass(frozen=True)
class Heading:
    """A markdown heading."""

    text: str
    level: int
    line: int


@dataclass(frozen=True)
class ListItemRecord:
    """A single list line as reported by the outline index."""

    line: int
    parent_line: int = TOP_LEVEL
    task: str | None = None  # checkbox marker character, None for plain bullets

    @property
    def is_top_level(self) -> bool:
        return self.parent_line < 0


@dataclass
class Outline:
    """Headings and list items of one note, both in line order."""

    headings: list[Heading] = field(default_factory=list)
    list_items: list[ListItemRecord] = field(default_factory=list)


def split_lines(text: str) -> list[str]:
    """Split note text on any line ending, keeping a trailing empty line."""
    return _LINE_BREAK_RE.split(text)


def _frontmatter_end(lines: list[str], text: str) -> int:
    """Return the index of the first body line (0 when there is no frontmatter)."""
    if not lines or lines[0].strip() != "---" or not frontmatter.checks(text):
        return 0
    for i in range(1, len(lines)):
        if lines[i].strip() in ("---", "..."):
            return i + 1
    return 0


def _indent_width(indent: str) -> int:
    return len(indent.expandtabs(4))


def parse_outline(text: str) -> Outline:
    """Build the outline index for a note.

    Headings and list items inside frontmatter or fenced code blocks are ignored.
    A list item's parent is the nearest preceding item with a smaller indent in
    the same list; a heading or an unindented paragraph line ends the list.
    """
    lines = split_lines(text)
    outline = Outline()
    stack: list[tuple[int, int]] = []  # (indent width, line)
    in_fence = False

    for i in range(_frontmatter_end(lines, text), len(lines)):
        line = lines[i]

        if _FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            outline.headings.append(
                Heading(text=heading.group(2).strip(), level=len(heading.group(1)), line=i)
            )
            stack.clear()
            continue

        item = _LIST_ITEM_RE.match(line)
        if item:
            width = _indent_width(item.group(1))
            while stack and stack[-1][0] >= width:
                stack.pop()
            parent = stack[-1][1] if stack else TOP_LEVEL
            checkbox = _CHECKBOX_RE.match(item.group(2))
            outline.list_items.append(
                ListItemRecord(
                    line=i,
                    parent_line=parent,
                    task=checkbox.group(1) if checkbox else None,
                )
            )
            stack.append((width, i))
            continue

        # Unindented text ends the list; indented text continues the current item
        if line.strip() and not line[0].isspace():
            stack.clear()

    return outline
