"""Vault connector for reading and writing Obsidian vault files."""

import fnmatch
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class VaultPathError(ValueError):
    """A note path points outside the vault."""


class VaultConnector:
    """Connects to an Obsidian vault and reads/writes notes by relative path."""

    DEFAULT_EXCLUDES = [
        ".obsidian/*",
        ".trash/*",
        "node_modules/*",
        ".git/*",
        "*.excalidraw.md",
    ]

    def __init__(
        self,
        vault_path: Path,
        include_patterns: list[str] | None = None,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        """Initialize the vault connector.

        Args:
            vault_path: Path to the Obsidian vault root.
            include_patterns: Glob patterns for files to include. Defaults to ["**/*.md"].
            exclude_patterns: Glob patterns for files to exclude.
        """
        self.vault_path = vault_path
        self.include_patterns = include_patterns or ["**/*.md"]
        self.exclude_patterns = exclude_patterns or self.DEFAULT_EXCLUDES

    def _should_exclude(self, relative_path: str) -> bool:
        """Check if a file should be excluded based on patterns."""
        return any(fnmatch.fnmatch(relative_path, pattern) for pattern in self.exclude_patterns)

    def list_notes(self) -> list[Path]:
        """List all note files in the vault.

        Returns:
            List of paths to note files, relative to vault root.
        """
        notes: list[Path] = []
        for pattern in self.include_patterns:
            for file_path in self.vault_path.glob(pattern):
                if file_path.is_file():
                    relative = file_path.relative_to(self.vault_path)
                    if not self._should_exclude(relative.as_posix()):
                        notes.append(relative)
        return sorted(set(notes))

    def contains(self, relative_path: Path) -> bool:
        """True when relative_path resolves to a location inside the vault."""
        full_path = (self.vault_path / relative_path).resolve()
        return full_path.is_relative_to(self.vault_path.resolve())

    def _resolve(self, relative_path: Path) -> Path:
        if not self.contains(relative_path):
            raise VaultPathError(f"Path is outside the vault: {relative_path.as_posix()}")
        return self.vault_path / relative_path

    def exists(self, relative_path: Path) -> bool:
        return self._resolve(relative_path).is_file()

    def read_text(self, relative_path: Path) -> str:
        """Read a note's full text.

        Args:
            relative_path: Path to the note, relative to vault root.

        Returns:
            The raw note content.
        """
        full_path = self._resolve(relative_path)
        return full_path.read_text(encoding="utf-8")

    def write_text(self, relative_path: Path, content: str) -> None:
        """Replace a note's full text, creating parent folders for new notes."""
        full_path = self._resolve(relative_path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%d chars)", relative_path, len(content))
