"""Block references and [[wiki links]] pointing at them."""

import re
from pathlib import PurePosixPath

# Trailing block anchor: "some text ^abc123"
_BLOCK_ANCHOR_RE = re.compile(r"[ \t]+\^([A-Za-z0-9-]+)[ \t]*$")

# Trailing link to a block: "some text [[Note#^abc123]]" or "[[Note#^abc123|alias]]"
_BLOCK_LINK_RE = re.compile(r"[ \t]*\[\[([^\]|#]+)#\^([A-Za-z0-9-]+)(?:\|[^\]]*)?\]\][ \t]*$")

# Any block anchor at the end of a line, for collecting a note's anchors
_ANY_ANCHOR_RE = re.compile(r"[ \t]\^([A-Za-z0-9-]+)[ \t]*$", re.MULTILINE)

# Match fenced code blocks (```...```)
_FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")


def trailing_anchor(line: str) -> str | None:
    """Return the block anchor id a line ends with, if any."""
    match = _BLOCK_ANCHOR_RE.search(line)
    return match.group(1) if match else None


def trailing_block_link(line: str) -> str | None:
    """Return the trailing [[Note#^id]] link text of a line, if any."""
    match = _BLOCK_LINK_RE.search(line)
    return match.group(0).strip() if match else None


def strip_block_anchor(line: str) -> str:
    return _BLOCK_ANCHOR_RE.sub("", line)


def strip_block_link(line: str) -> str:
    """Remove a trailing block link, recovering the line it was appended to."""
    return _BLOCK_LINK_RE.sub("", line)


def find_block_anchors(text: str) -> set[str]:
    """Collect every block anchor id defined in a note, outside code blocks."""
    cleaned = _FENCED_CODE_RE.sub("", text)
    return set(_ANY_ANCHOR_RE.findall(cleaned))


def resolve_block_link(target_path: str, anchor: str, alias: str | None = None) -> str:
    """Build the wiki link to a block anchor in another note.

    Links use the note's basename, which is how Obsidian resolves them:
    ``resolve_block_link("00_Daily/2026-02-05.md", "abc123")`` gives
    ``[[2026-02-05#^abc123]]``.
    """
    stem = PurePosixPath(target_path).stem
    if alias:
        return f"[[{stem}#^{anchor}|{alias}]]"
    return f"[[{stem}#^{anchor}]]"
