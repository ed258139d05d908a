"""Database Session Manager: async engine, session factory, rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Errors leave session() unchanged; wrapping them is the repositories' job
    - Pooled backends use pool_pre_ping for stale connection detection
    - No module-level engine or manager; the caller owns the instance

Design Decisions:
    - expire_on_commit=False: records are built from rows after commit without lazy loads
    - SQLite engines get no pool sizing (aiosqlite uses a static/null pool)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_recycle: int = 1800,
        pool_timeout: int = 30,
        echo: bool = False,
    ):
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            **_pool_options(
                database_url, pool_size, max_overflow, pool_recycle, pool_timeout,
            ),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(
                f"DB error, transaction rolled back: {e}",
                extra={"database": self.engine.url.database},
            )
            raise
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("DB engine disposed")


def _pool_options(
    database_url: str,
    pool_size: int,
    max_overflow: int,
    pool_recycle: int,
    pool_timeout: int,
) -> dict:
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_recycle": pool_recycle,
        "pool_timeout": pool_timeout,
        "pool_pre_ping": True,
    }
