"""Database Session Manager — one async engine, per-request sessions, StoreError mapping.

Invariants:
    - A session that raises is rolled back before the error leaves the context
    - SQLAlchemy exceptions never cross this boundary: they become StoreError
    - Pool sizing applies to server databases only (SQLite uses its own pool)

Design Decisions:
    - Module-level db_manager set by init_db() in the FastAPI lifespan
    - expire_on_commit=False: rows stay readable after commit in async code
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from smartsales.core.errors import StoreError

logger = logging.getLogger(__name__)

# First match wins; IntegrityError and OperationalError subclass DBAPIError
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def to_store_error(exc: SQLAlchemyError) -> StoreError:
    for kind, message, operation in _ERROR_MAP:
        if isinstance(exc, kind):
            return StoreError(message, operation)
    return StoreError("Database operation failed")


def engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict[str, Any]:
    options: dict[str, Any] = {"pool_pre_ping": True}
    if make_url(database_url).get_backend_name() != "sqlite":
        options.update(
            pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
        )
    return options


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url, **engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Session rolled back after database error: {e}")
            raise to_store_error(e) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """SELECT 1 round-trip; False instead of raising."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except (StoreError, OSError) as e:
            logger.error(f"Database health check failed: {e}")
            return False
        return True

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
