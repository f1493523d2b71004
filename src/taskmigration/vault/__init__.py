"""Vault connector, outline index and daily note modules."""

from taskmigration.vault.connector import VaultConnector, VaultPathError
from taskmigration.vault.daily import DailyNoteIndex, DailyNotes
from taskmigration.vault.outline import TOP_LEVEL, Heading, ListItemRecord, Outline, parse_outline

__all__ = [
    "TOP_LEVEL",
    "DailyNoteIndex",
    "DailyNotes",
    "Heading",
    "ListItemRecord",
    "Outline",
    "VaultConnector",
    "VaultPathError",
    "parse_outline",
]
