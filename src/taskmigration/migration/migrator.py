"""Migration commands: carry open tasks forward from previous daily notes, or sideways."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from taskmigration.migration.errors import (
    DestinationError,
    MissingTaskHeadingError,
    NoteOrderError,
)
from taskmigration.migration.extractor import NoteExtraction, Outcome, extract_tasks
from taskmigration.migration.insertion import append_at_section_end, insert_after_last_task
from taskmigration.migration.section import TaskSection, find_task_section
from taskmigration.models import MigrationSettings
from taskmigration.vault.connector import VaultConnector
from taskmigration.vault.daily import DailyNoteIndex
from taskmigration.vault.outline import parse_outline, split_lines

logger = logging.getLogger(__name__)

# Asked once for a sideways destination; returns None when the user cancels
Chooser = Callable[[list[Path]], Path | None]


@dataclass
class MigrationResult:
    """What a migration moved and which notes it touched."""

    destination: Path
    lines: list[str] = field(default_factory=list)
    notes_scanned: int = 0
    notes_updated: list[Path] = field(default_factory=list)
    stopped_at: Path | None = None
    dry_run: bool = False

    @property
    def migrated_count(self) -> int:
        return len(self.lines)


class TaskMigrator:
    """Runs migrations against a vault.

    Writes happen note by note: each source note is rewritten before the next
    one is read, and the destination is written last. A failure part-way leaves
    earlier sources marked as migrated; running again picks up from there.
    """

    def __init__(
        self,
        connector: VaultConnector,
        daily_index: DailyNoteIndex,
        settings: MigrationSettings,
        *,
        dry_run: bool = False,
    ) -> None:
        self.connector = connector
        self.daily_index = daily_index
        self.settings = settings
        self.dry_run = dry_run

    def _write(self, path: Path, content: str) -> None:
        if self.dry_run:
            logger.info("DRY RUN: would write %s", path)
            return
        self.connector.write_text(path, content)

    def _read_note(self, path: Path) -> str:
        if not self.connector.contains(path):
            raise NoteOrderError(f"Note is outside the vault: {path.as_posix()}")
        if not self.connector.exists(path):
            raise NoteOrderError(f"Note not found: {path.as_posix()}")
        return self.connector.read_text(path)

    def _require_section(self, text: str) -> TaskSection:
        section = find_task_section(
            parse_outline(text),
            self.settings.task_heading_name,
            self.settings.task_heading_level,
        )
        if section is None:
            raise MissingTaskHeadingError(
                self.settings.task_heading_name, self.settings.task_heading_level
            )
        return section

    def migrate_from_note(self, path: Path) -> NoteExtraction:
        """Extract from one note and rewrite it with the selected tasks marked migrated."""
        text = self.connector.read_text(path)
        extraction = extract_tasks(text, path.as_posix(), self.settings)
        if extraction.updated_text is not None and extraction.updated_text != text:
            self._write(path, extraction.updated_text)
        return extraction

    def scan_previous(self, previous: list[Path], result: MigrationResult) -> None:
        """Walk back through previous notes (nearest first), collecting lines into result.

        Notes without the task heading are skipped. The scan stops at the first
        note whose section is already fully migrated: every older note is
        assumed to have been handled by the run that migrated it.
        """
        for path in previous:
            extraction = self.migrate_from_note(path)
            result.notes_scanned += 1

            if extraction.outcome is Outcome.NO_TASKS_HEADING:
                logger.debug("No task heading in %s, skipping", path)
                continue
            if extraction.outcome is Outcome.ALREADY_MIGRATED:
                logger.info("Reached already-migrated note %s, stopping", path)
                result.stopped_at = path
                return
            if extraction.lines:
                logger.info("Collected %d line(s) from %s", len(extraction.lines), path)
                result.lines.extend(extraction.lines)
                result.notes_updated.append(path)

    def migrate_daily(self, note_path: Path) -> MigrationResult:
        """Carry open tasks from earlier daily notes into note_path's task section.

        Raises:
            MissingTaskHeadingError: note_path has no task section.
            NoteOrderError: note_path is not a daily note, or is not among them.
        """
        text = self._read_note(note_path)
        self._require_section(text)

        if not self.daily_index.is_daily_note(note_path):
            raise NoteOrderError(
                f"{note_path.as_posix()} is not a daily note in {self.daily_index.folder}"
            )
        daily = self.daily_index.locate(note_path)
        if daily.current_index < 0:
            raise NoteOrderError("Could not find current daily note")

        result = MigrationResult(destination=note_path, dry_run=self.dry_run)
        self.scan_previous(daily.previous(), result)

        if not result.lines:
            logger.info("Nothing to migrate into %s", note_path)
            return result

        text = self._read_note(note_path)
        section = self._require_section(text)
        lines = append_at_section_end(split_lines(text), section, result.lines)
        self._write(note_path, "\n".join(lines))
        logger.info("Migrated %d line(s) into %s", result.migrated_count, note_path)
        return result

    def migrate_sideways(
        self,
        note_path: Path,
        destination: Path | None = None,
        chooser: Chooser | None = None,
    ) -> MigrationResult:
        """Move open tasks out of note_path into another note.

        The destination is, in order: the `destination` argument, the configured
        sideways file, or the chooser's pick from every other note in the vault.
        A cancelled choice is a no-op.

        Raises:
            MissingTaskHeadingError: note_path has no task section.
            DestinationError: no destination can be determined, it is note_path,
                or it lies outside the vault.
        """
        text = self._read_note(note_path)
        self._require_section(text)

        if destination is None and self.settings.sideways_file:
            destination = Path(self.settings.sideways_file)
        if destination is None:
            if chooser is None:
                raise DestinationError("No destination given and no sideways file configured")
            candidates = [p for p in self.connector.list_notes() if p != note_path]
            destination = chooser(candidates)
            if destination is None:
                logger.info("No destination chosen, nothing migrated")
                return MigrationResult(destination=note_path, dry_run=self.dry_run)
        if destination.suffix != ".md":
            # Append rather than replace: "v1.2 plan" becomes "v1.2 plan.md"
            destination = destination.with_name(destination.name + ".md")
        if not self.connector.contains(destination):
            raise DestinationError(f"Destination is outside the vault: {destination.as_posix()}")
        if destination == note_path:
            raise DestinationError("Cannot migrate tasks into the note they come from")

        result = MigrationResult(destination=destination, dry_run=self.dry_run)
        extraction = extract_tasks(text, note_path.as_posix(), self.settings)
        result.notes_scanned = 1
        if not extraction.lines:
            logger.info("No open tasks in %s", note_path)
            return result

        if extraction.updated_text is not None:
            self._write(note_path, extraction.updated_text)
        result.lines = extraction.lines
        result.notes_updated.append(note_path)

        dest_text = ""
        if self.connector.exists(destination):
            dest_text = self.connector.read_text(destination)
        self._write(destination, self._insert_sideways(dest_text, extraction.lines))
        logger.info(
            "Migrated %d line(s) from %s to %s", result.migrated_count, note_path, destination
        )
        return result

    def _insert_sideways(self, text: str, new_lines: list[str]) -> str:
        """Place lines after the destination's last task, adding the task heading if needed."""
        outline = parse_outline(text)
        section = find_task_section(
            outline, self.settings.task_heading_name, self.settings.task_heading_level
        )
        if section is None:
            heading = f"{'#' * self.settings.task_heading_level} {self.settings.task_heading_name}"
            body = text.rstrip("\r\n")
            prefix = f"{body}\n\n" if body else ""
            return prefix + "\n".join([heading, *new_lines]) + "\n"
        lines = insert_after_last_task(split_lines(text), section, outline.list_items, new_lines)
        return "\n".join(lines)
