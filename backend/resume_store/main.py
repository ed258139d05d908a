"""Process Wiring: builds the Repositories bundle from settings.

Invariants:
    - Logging is configured before the engine is created
    - The engine is disposed when the context exits, even on error
    - The yielded Repositories is built once and never mutated
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from resume_store.config import Settings, get_settings
from resume_store.core.repository_protocols import Repositories
from resume_store.infrastructure.database import DatabaseSessionManager
from resume_store.infrastructure.observability import setup_logging
from resume_store.infrastructure.repositories import build_repositories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_repositories(
    settings: Settings | None = None,
) -> AsyncIterator[Repositories]:
    """Startup/shutdown lifecycle for a process that uses the resume store."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle,
        pool_timeout=settings.database_pool_timeout,
        echo=settings.database_echo,
    )
    logger.info(
        "Resume store started",
        extra={"database": manager.engine.url.database},
    )
    try:
        yield build_repositories(manager.session_factory)
    finally:
        await manager.dispose()
        logger.info("Resume store shut down")
        logging.root.removeHandler(handler)
