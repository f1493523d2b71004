"""Task migration API endpoints."""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from taskmigration.api.dependencies import build_migrator, get_settings
from taskmigration.config import Settings
from taskmigration.migration.errors import (
    DestinationError,
    MissingTaskHeadingError,
    NoteOrderError,
    TaskMigrationError,
)
from taskmigration.migration.migrator import MigrationResult
from taskmigration.models import MigrateRequest, MigrationResponse, SidewaysRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["migrate"])

_ERROR_STATUS: dict[type[TaskMigrationError], int] = {
    MissingTaskHeadingError: 400,
    NoteOrderError: 404,
    DestinationError: 422,
}


def _to_http(error: TaskMigrationError) -> HTTPException:
    status = _ERROR_STATUS.get(type(error), 400)
    return HTTPException(status_code=status, detail=str(error))


def _to_response(result: MigrationResult) -> MigrationResponse:
    return MigrationResponse(
        destination=result.destination.as_posix(),
        lines=result.lines,
        migrated_count=result.migrated_count,
        notes_scanned=result.notes_scanned,
        notes_updated=[p.as_posix() for p in result.notes_updated],
        stopped_at=result.stopped_at.as_posix() if result.stopped_at else None,
        dry_run=result.dry_run,
    )


@router.post("/migrate", response_model=MigrationResponse)
async def migrate(
    req: MigrateRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MigrationResponse:
    """Carry open tasks from previous daily notes into the given daily note."""
    migrator = build_migrator(settings, dry_run=req.dry_run)
    try:
        result = migrator.migrate_daily(Path(req.note_path))
    except TaskMigrationError as e:
        logger.warning("Migration into %s failed: %s", req.note_path, e)
        raise _to_http(e) from e
    return _to_response(result)


@router.post("/migrate/sideways", response_model=MigrationResponse)
async def migrate_sideways(
    req: SidewaysRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MigrationResponse:
    """Move open tasks from a note into another note.

    There is no interactive chooser over HTTP: the destination must come from
    the request or from the configured sideways file.
    """
    migrator = build_migrator(settings, dry_run=req.dry_run)
    destination = Path(req.destination) if req.destination else None
    try:
        result = migrator.migrate_sideways(Path(req.note_path), destination)
    except TaskMigrationError as e:
        logger.warning("Sideways migration from %s failed: %s", req.note_path, e)
        raise _to_http(e) from e
    return _to_response(result)
