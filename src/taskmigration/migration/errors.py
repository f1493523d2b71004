"""Errors surfaced to the user as single-line notifications."""


class TaskMigrationError(Exception):
    """Base class for migration failures that abort before anything is moved."""


class MissingTaskHeadingError(TaskMigrationError):
    """The active note has no section under the configured heading."""

    def __init__(self, heading_name: str, heading_level: int) -> None:
        self.heading_name = heading_name
        self.heading_level = heading_level
        super().__init__(f"Could not find {'#' * heading_level} {heading_name} heading")


class NoteOrderError(TaskMigrationError):
    """The active note cannot be placed among the ordered daily notes."""


class DestinationError(TaskMigrationError):
    """A sideways migration has no usable destination."""
