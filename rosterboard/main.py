"""Rosterboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError → structured JSON responses
    - Roster storage initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Storage backend chosen by settings.roster_backend (database | json)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rosterboard.api.dependencies import init_store
from rosterboard.api.error_handlers import register_error_handlers
from rosterboard.api.routes import commands, health, interactions
from rosterboard.config import get_settings
from rosterboard.infrastructure import database
from rosterboard.infrastructure.observability import setup_logging
from rosterboard.infrastructure.roster_repository import build_roster_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    repository = await build_roster_repository(settings)
    init_store(repository)
    logger.info("Rosterboard API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Rosterboard API shutting down")


app = FastAPI(
    title="Rosterboard API", version="1.0.0", lifespan=lifespan,
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(commands.router)
app.include_router(interactions.router)

register_error_handlers(app)
