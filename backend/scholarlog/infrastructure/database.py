"""Store Handle — one async engine per process, sessions that roll back on failure.

Invariants:
    - A session that exits with an exception is rolled back before it is closed
    - SQLAlchemy errors escaping a session surface as DatabaseError (core/errors.py),
      never as driver exceptions
    - The handle is built in the lifespan and passed to services explicitly

Design Decisions:
    - No module-level singleton: tests wrap their own engine via from_engine()
    - expire_on_commit=False: rows stay readable after the session closes
    - Pool sizing only for server databases; SQLite keeps its own pool class
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from scholarlog.core.errors import DatabaseError
from scholarlog.db.base import Base

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError/OperationalError are DBAPIErrors
_ERROR_TABLE: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Store unreachable or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    """Translate a SQLAlchemy exception into the domain's internal error."""
    for error_type, message, operation in _ERROR_TABLE:
        if isinstance(exc, error_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out short-lived sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self._bind(create_async_engine(database_url, **options))

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (tests, scripts)."""
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """One unit of work; rolled back unless the caller committed."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"{type(e).__name__} in session: {e}")
            raise to_database_error(e) from e
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create missing tables (development convenience; Alembic in production)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError:
            return False
        except OSError as e:
            logger.error(f"Store health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()
