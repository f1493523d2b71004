"""User-configurable migration settings stored in data/settings.json."""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from taskmigration.models import MigrationSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = MigrationSettings().model_dump()

_SETTINGS_FILE = "settings.json"


def load_settings(data_path: Path) -> dict[str, Any]:
    """Read settings from data_path/settings.json.

    Returns DEFAULT_SETTINGS and writes the defaults file if missing or unparseable.
    """
    settings_file = data_path / _SETTINGS_FILE
    if settings_file.exists():
        try:
            with open(settings_file, encoding="utf-8") as f:
                result: dict[str, Any] = json.load(f)
                return result
        except (json.JSONDecodeError, OSError):
            logger.warning("Settings file corrupt or unreadable, returning defaults")
    # Write defaults so the file exists for next time
    save_settings(data_path, DEFAULT_SETTINGS)
    return DEFAULT_SETTINGS.copy()


def save_settings(data_path: Path, settings: dict[str, Any]) -> None:
    """Write settings to data_path/settings.json using atomic write."""
    data_path.mkdir(parents=True, exist_ok=True)
    settings_file = data_path / _SETTINGS_FILE
    fd, tmp_path = tempfile.mkstemp(dir=str(data_path), suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, str(settings_file))
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def load_migration_settings(data_path: Path) -> MigrationSettings:
    """Load and validate migration settings, falling back to defaults on bad values.

    Unknown keys are ignored; keys missing from the file take their default.
    """
    raw = load_settings(data_path)
    try:
        return MigrationSettings.model_validate(raw)
    except ValidationError as e:
        logger.warning("Invalid migration settings, returning defaults: %s", e)
        return MigrationSettings()
