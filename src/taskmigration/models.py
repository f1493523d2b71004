"""Pydantic models for the task migration API and settings."""

from pydantic import BaseModel, Field, field_validator


class MigrationSettings(BaseModel):
    """User-configurable migration settings (persisted in settings.json)."""

    task_heading_name: str = "Tasks"
    task_heading_level: int = Field(default=2, ge=1, le=6)
    sideways_file: str | None = None
    enable_task_linking_and_tagging: bool = False
    ref_link_alias: str | None = None
    migration_tag: str | None = None
    tag_all_lines: bool = False
    migratable_markers: list[str] = Field(default_factory=lambda: [" "])

    @field_validator("task_heading_name")
    @classmethod
    def _heading_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("task_heading_name must be non-empty")
        return value.strip()

    @field_validator("migratable_markers")
    @classmethod
    def _single_char_markers(cls, value: list[str]) -> list[str]:
        for marker in value:
            if len(marker) != 1:
                raise ValueError(f"Task markers must be a single character, got {marker!r}")
            if marker == ">":
                raise ValueError("The migrated marker '>' cannot be migratable")
        return value


class MigrateRequest(BaseModel):
    """Request body for the /migrate endpoint."""

    note_path: str  # vault-relative path of the note receiving tasks
    dry_run: bool = False


class SidewaysRequest(BaseModel):
    """Request body for the /migrate/sideways endpoint."""

    note_path: str  # vault-relative path of the note giving up tasks
    destination: str | None = None  # falls back to settings.sideways_file
    dry_run: bool = False


class MigrationResponse(BaseModel):
    """Result of a migration run."""

    destination: str
    lines: list[str]
    migrated_count: int
    notes_scanned: int
    notes_updated: list[str]
    stopped_at: str | None = None  # note that ended the backward scan
    dry_run: bool = False
