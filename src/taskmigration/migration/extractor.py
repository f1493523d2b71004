"""Per-note extraction: select the task lines to carry out of one note's task section."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from taskmigration.migration.checklist import MIGRATED_MARKER, mark_migrated
from taskmigration.migration.linker import BlockRefLinker
from taskmigration.migration.section import TaskSection, find_task_section
from taskmigration.migration.tree import build_item_tree, filter_migratable, flatten_tree
from taskmigration.models import MigrationSettings
from taskmigration.vault.links import find_block_anchors
from taskmigration.vault.outline import parse_outline, split_lines

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    """How a note answered an extraction."""

    EXTRACTED = "extracted"  # lines (possibly none) were selected
    NO_TASKS_HEADING = "no_tasks_heading"
    ALREADY_MIGRATED = "already_migrated"


@dataclass
class NoteExtraction:
    """Result of extracting from one note.

    `updated_text` is the note's new content with selected tasks marked as
    migrated, or None when the note does not need rewriting.
    """

    outcome: Outcome
    lines: list[str] = field(default_factory=list)
    updated_text: str | None = None
    section: TaskSection | None = None


def extract_tasks(text: str, source_path: str, settings: MigrationSettings) -> NoteExtraction:
    """Select migratable lines from the configured task section of a note.

    A section that holds migrated markers and no migratable ones reports
    ALREADY_MIGRATED: it was the target of an earlier run, so anything older
    has already been carried forward.
    """
    outline = parse_outline(text)
    section = find_task_section(outline, settings.task_heading_name, settings.task_heading_level)
    if section is None:
        return NoteExtraction(Outcome.NO_TASKS_HEADING)

    records = [r for r in outline.list_items if section.contains(r.line)]
    if not records:
        return NoteExtraction(Outcome.EXTRACTED, section=section)

    markers = {r.task for r in records if r.task is not None}
    migratable = set(settings.migratable_markers)
    if MIGRATED_MARKER in markers and not markers & migratable:
        return NoteExtraction(Outcome.ALREADY_MIGRATED, section=section)

    selected = filter_migratable(build_item_tree(records), migratable)
    if not selected:
        return NoteExtraction(Outcome.EXTRACTED, section=section)

    linker = None
    if settings.enable_task_linking_and_tagging:
        linker = BlockRefLinker(
            source_path,
            existing_anchors=find_block_anchors(text),
            alias=settings.ref_link_alias,
            tag=settings.migration_tag,
        )

    lines = split_lines(text)
    carried_lines: list[str] = []
    for record in flatten_tree(selected):
        original = lines[record.line]
        source = mark_migrated(original) if record.task in migratable else original
        carried = original
        if linker and (settings.tag_all_lines or record.line in selected.roots):
            source, carried = linker.link(source, original)
        lines[record.line] = source
        carried_lines.append(carried)

    logger.debug("Selected %d line(s) from %s", len(carried_lines), source_path)
    return NoteExtraction(
        Outcome.EXTRACTED,
        lines=carried_lines,
        updated_text="\n".join(lines),
        section=section,
    )
