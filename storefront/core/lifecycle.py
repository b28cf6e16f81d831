"""
Application lifecycle management using the FastAPI lifespan pattern.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.config.settings import get_settings
from storefront.database.async_db import async_engine
from storefront.models.db import Base

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Startup and shutdown tasks for the API process."""

    def __init__(self) -> None:
        self._settings = get_settings()
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        if self._settings.DB_CREATE_TABLES:
            async with async_engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ensured")

        if not self._settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not configured - error tracking disabled")

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        await async_engine.dispose()
        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    manager = LifecycleManager()
    await manager.startup()
    try:
        yield
    finally:
        await manager.shutdown()
