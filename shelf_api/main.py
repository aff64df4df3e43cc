"""Shelf API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShelfError → structured JSON responses
    - Database pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Settings read inside the lifespan, not at import: the app object imports
      without DATABASE_URL (tests override get_db)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shelf_api.api.error_handlers import register_error_handlers
from shelf_api.api.routes import books, health, root, users
from shelf_api.config import get_settings
from shelf_api.infrastructure.database import init_db
from shelf_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url)
    if settings.create_tables:
        await manager.create_tables()
    logger.info("Shelf API started")
    yield
    await manager.close()
    logger.info("Shelf API shutting down")


app = FastAPI(title="Shelf API", version="0.1.0", lifespan=lifespan)

app.include_router(root.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(books.router)

register_error_handlers(app)
