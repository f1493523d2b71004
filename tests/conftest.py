"""Shared test fixtures."""

from contextlib import contextmanager
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskmigration.api.dependencies import get_settings
from taskmigration.main import app

DAILY_FOLDER = "00_Daily"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def vault(tmp_path) -> Path:
    """An empty vault with a daily notes folder."""
    vault_dir = tmp_path / "vault"
    (vault_dir / DAILY_FOLDER).mkdir(parents=True)
    return vault_dir


def write_daily(vault: Path, date_str: str, content: str) -> Path:
    """Write a daily note and return its vault-relative path."""
    relative = Path(DAILY_FOLDER) / f"{date_str}.md"
    (vault / relative).write_text(content, encoding="utf-8")
    return relative


def read_note(vault: Path, relative: Path) -> str:
    return (vault / relative).read_text(encoding="utf-8")


@contextmanager
def override_vault_path(path):
    """Temporarily override the cached settings vault_path, restoring it on exit."""
    settings = get_settings()
    original = settings.vault_path
    settings.vault_path = path
    try:
        yield settings
    finally:
        settings.vault_path = original
