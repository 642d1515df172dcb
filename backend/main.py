"""
tableview FastAPI application.

Entry point for the table server.
"""

from __future__ import annotations

import locale
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.config import settings
from backend.routes import table as table_routes
from backend.services.recordset_loader import recordset_store

logger = logging.getLogger(__name__)


def configure_collation(name: str) -> bool:
    """
    Set LC_COLLATE for locale-aware sorting.
    An unavailable locale is logged and the process default kept.
    """
    if not name:
        return False
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error:
        logger.warning("Collation locale %r is not available, keeping the default", name)
        return False
    logger.info("Collation locale set to %s", name)
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Startup:
    - Configure logging and collation
    - Load the recordset (demo contacts when no path is configured)
    """
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    configure_collation(settings.COLLATION_LOCALE)
    recordset_store.load(settings.RECORDSET_PATH)
    logger.info("Serving recordset from %s (%s)", recordset_store.source, settings.ENVIRONMENT)

    yield


app = FastAPI(
    title="tableview",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

# Register routes
app.include_router(table_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
