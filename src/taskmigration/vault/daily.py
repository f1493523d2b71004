"""Daily note enumeration in date order."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class DailyNotes:
    """Daily notes ordered oldest first, and where the current note sits among them."""

    current_index: int  # -1 when the current note is not a known daily note
    notes: list[Path]

    def previous(self) -> list[Path]:
        """Notes strictly before the current one, nearest first."""
        if self.current_index < 0:
            return []
        return list(reversed(self.notes[: self.current_index]))


class DailyNoteIndex:
    """Finds daily notes by parsing their paths under the daily folder with a strftime format."""

    def __init__(self, vault_path: Path, folder: str = "00_Daily", date_format: str = "%Y-%m-%d"):
        self.vault_path = vault_path
        self.folder = folder
        self.date_format = date_format

    @property
    def daily_dir(self) -> Path:
        return self.vault_path / self.folder

    def note_date(self, relative_path: Path) -> date | None:
        """Date encoded in a daily note's path under the daily folder, or None.

        The path below the folder, without ``.md``, is parsed with the date
        format, so nested layouts such as ``%Y/%m/%Y-%m-%d`` work.
        """
        below = relative_path
        if Path(self.folder) != Path("."):
            try:
                below = relative_path.relative_to(self.folder)
            except ValueError:
                return None
        return self._parse(below.as_posix().removesuffix(".md"))

    def _parse(self, stem: str) -> date | None:
        try:
            return datetime.strptime(stem, self.date_format).date()
        except (ValueError, re.error):
            pass
        # strptime rejects repeated directives ("%Y/%m/%Y-%m-%d"): parse the last
        # segment, then require the whole path to match the formatted date
        name_format = self.date_format.rsplit("/", 1)[-1]
        try:
            day = datetime.strptime(stem.rsplit("/", 1)[-1], name_format).date()
        except (ValueError, re.error):
            return None
        return day if day.strftime(self.date_format) == stem else None

    def is_daily_note(self, relative_path: Path) -> bool:
        """True when the note lives in the daily folder and its path parses as a date."""
        return relative_path.suffix == ".md" and self.note_date(relative_path) is not None

    def path_for(self, day: date) -> Path:
        return Path(self.folder) / f"{day.strftime(self.date_format)}.md"

    def list_daily_notes(self) -> list[Path]:
        """All daily notes, vault-relative, sorted by date (oldest first)."""
        if not self.daily_dir.exists():
            return []

        dated: list[tuple[date, Path]] = []
        for md_file in self.daily_dir.rglob("*.md"):
            relative = md_file.relative_to(self.vault_path)
            note_day = self.note_date(relative)
            if note_day is None:
                logger.debug("Skipping non-daily note %s", relative)
                continue
            dated.append((note_day, relative))
        dated.sort()
        return [path for _day, path in dated]

    def locate(self, relative_path: Path) -> DailyNotes:
        """Order all daily notes and find relative_path among them."""
        notes = self.list_daily_notes()
        try:
            current_index = notes.index(relative_path)
        except ValueError:
            current_index = -1
        return DailyNotes(current_index=current_index, notes=notes)
