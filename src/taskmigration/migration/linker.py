"""Back-reference anchors on source lines and block links on carried lines."""

from __future__ import annotations

import secrets

from taskmigration.vault.links import (
    resolve_block_link,
    strip_block_anchor,
    strip_block_link,
    trailing_anchor,
    trailing_block_link,
)

ANCHOR_BYTES = 3  # 6 hex characters


def create_block_ref() -> str:
    """Generate a random block anchor id: 6 lowercase hexadecimal characters."""
    return secrets.token_hex(ANCHOR_BYTES)


class BlockRefLinker:
    """Links carried task lines back to the note they came from.

    One linker serves one source note; `existing_anchors` holds the anchor ids
    already defined there so that new ones never collide with them.
    """

    def __init__(
        self,
        source_path: str,
        existing_anchors: set[str] | None = None,
        alias: str | None = None,
        tag: str | None = None,
    ) -> None:
        self.source_path = source_path
        self.anchors = set(existing_anchors or ())
        self.alias = alias or None
        self.tag = tag.strip() if tag and tag.strip() else None

    def mint_anchor(self) -> str:
        anchor = create_block_ref()
        while anchor in self.anchors:
            anchor = create_block_ref()
        self.anchors.add(anchor)
        return anchor

    def _with_tag(self, line: str) -> str:
        if self.tag is None or self.tag in line.split():
            return line
        return f"{line.rstrip()} {self.tag}"

    def link(self, source_line: str, carried_line: str) -> tuple[str, str]:
        """Return (line left behind, line carried forward) with anchor, tag and link applied.

        A carried line that already links to a block keeps that link, so a task
        moved several times still points at where it started.
        """
        existing_link = trailing_block_link(carried_line)
        if existing_link:
            carried = self._with_tag(strip_block_link(carried_line))
            return source_line, f"{carried} {existing_link}"

        anchor = trailing_anchor(source_line)
        if anchor is None:
            anchor = self.mint_anchor()
            source_line = f"{source_line.rstrip()} ^{anchor}"

        link = resolve_block_link(self.source_path, anchor, self.alias)
        carried = self._with_tag(strip_block_anchor(carried_line).rstrip())
        return source_line, f"{carried} {link}"
