"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from taskmigration import __version__
from taskmigration.api.migrate import router as migrate_router
from taskmigration.api.settings import router as settings_router
from taskmigration.config import get_settings
from taskmigration.vault.daily import DailyNoteIndex

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Log resolved configuration at startup for debugging."""
    s = get_settings()
    logger.info(
        "Task migration starting: vault_path=%s, daily_folder=%s, data_path=%s",
        s.vault_path,
        s.daily_folder,
        s.data_path,
    )
    if not s.vault_path or not s.vault_path.exists():
        logger.error("VAULT PATH NOT CONFIGURED OR MISSING, APIs will return 503 errors")
    yield


app = FastAPI(
    title="Task Migration",
    description="Carry unfinished tasks forward across Obsidian daily notes",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

# Include API routers
app.include_router(migrate_router)
app.include_router(settings_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Return project information."""
    return {
        "name": "Task Migration",
        "version": __version__,
        "description": "Carry unfinished tasks forward across Obsidian daily notes",
    }


@app.get("/health")
@app.get("/api/v1/health")
async def health() -> dict[str, Any]:
    """Health check endpoint with vault and daily folder status."""
    s = get_settings()

    checks: dict[str, Any] = {"status": "ok"}

    if not s.vault_path or not s.vault_path.exists():
        checks["status"] = "error"
        checks["vault"] = "not configured or missing"
        return checks
    checks["vault"] = "ok"

    index = DailyNoteIndex(s.vault_path, s.daily_folder, s.daily_format)
    if index.daily_dir.is_dir():
        checks["daily_folder"] = "ok"
        checks["daily_notes"] = len(index.list_daily_notes())
    else:
        checks["status"] = "warning"
        checks["daily_folder"] = "missing"

    return checks


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
