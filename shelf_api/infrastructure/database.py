"""Database Session Manager — async connection pool with per-request sessions and health checks.

Invariants:
    - Every session is closed on exit; closing discards any uncommitted work
    - Error translation happens once, in the record stores (services/record_store.py)
    - The engine pool is the only state shared between requests

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - Pool sizing left to SQLAlchemy defaults
    - expire_on_commit=False: records stay readable after the write commits
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy import text

from shelf_api.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling and health checks."""

    def __init__(self, database_url: str):
        self.engine = create_async_engine(database_url)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that is always closed, even when the caller raises."""
        session = self._session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create users/books tables if missing (development convenience)."""
        import shelf_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
