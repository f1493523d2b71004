"""Task selection, linking, insertion and the migration commands."""

from taskmigration.migration.errors import (
    DestinationError,
    MissingTaskHeadingError,
    NoteOrderError,
    TaskMigrationError,
)
from taskmigration.migration.extractor import NoteExtraction, Outcome, extract_tasks
from taskmigration.migration.migrator import MigrationResult, TaskMigrator

__all__ = [
    "DestinationError",
    "MigrationResult",
    "MissingTaskHeadingError",
    "NoteExtraction",
    "NoteOrderError",
    "Outcome",
    "TaskMigrationError",
    "TaskMigrator",
    "extract_tasks",
]
