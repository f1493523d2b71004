"""FastAPI dependency injection for shared resources."""

import logging
from functools import lru_cache
from pathlib import Path

from fastapi import HTTPException

from taskmigration.config import Settings
from taskmigration.migration.migrator import TaskMigrator
from taskmigration.settings import load_migration_settings
from taskmigration.vault.connector import VaultConnector
from taskmigration.vault.daily import DailyNoteIndex

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_data_path() -> Path:
    """Get the data directory path."""
    settings = get_settings()
    data_path = Path(settings.data_path) if settings.data_path else Path("data")
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def require_vault_path(settings: Settings) -> Path:
    """Return the configured vault path, or raise 503 when it is unusable."""
    vault_path = settings.vault_path
    if not vault_path or not vault_path.exists():
        raise HTTPException(status_code=503, detail="Vault path not configured or missing")
    return vault_path


def build_migrator(settings: Settings, *, dry_run: bool = False) -> TaskMigrator:
    """Create a migrator for one request, reading migration settings fresh from disk."""
    vault_path = require_vault_path(settings)
    return TaskMigrator(
        VaultConnector(vault_path),
        DailyNoteIndex(vault_path, settings.daily_folder, settings.daily_format),
        load_migration_settings(get_data_path()),
        dry_run=dry_run,
    )
