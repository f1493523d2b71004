"""Settings API endpoints for user-configurable migration options."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from taskmigration.api.dependencies import get_data_path
from taskmigration.models import MigrationSettings
from taskmigration.settings import load_migration_settings, load_settings, save_settings

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("/migration", response_model=MigrationSettings)
async def get_migration_settings() -> MigrationSettings:
    """Return the current migration settings."""
    return load_migration_settings(get_data_path())


@router.put("/migration", response_model=MigrationSettings)
async def update_migration_settings(body: MigrationSettings) -> MigrationSettings:
    """Replace the migration settings, keeping any other keys in the file."""
    data_path = get_data_path()
    settings: dict[str, Any] = load_settings(data_path)
    settings.update(body.model_dump())
    save_settings(data_path, settings)
    return body
