"""API route modules."""

from taskmigration.api.migrate import router as migrate_router
from taskmigration.api.settings import router as settings_router

__all__ = ["migrate_router", "settings_router"]
