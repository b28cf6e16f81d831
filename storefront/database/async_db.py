import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from storefront.config.settings import get_settings

# Registers the soft-delete filter on every ORM session
from . import soft_delete  # noqa: F401

logger = logging.getLogger(__name__)

settings = get_settings()


def create_async_database_engine() -> AsyncEngine:
    """Create the async engine from settings."""
    database_url = settings.async_database_url

    base_config = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,
    }

    if settings.DEBUG or database_url.startswith("sqlite"):
        # Development and file-based test databases: one connection per checkout
        logger.info("Creating async database engine (NullPool)")
        engine_config = {**base_config, "poolclass": NullPool}
    else:
        # The async engine picks AsyncAdaptedQueuePool on its own
        logger.info("Creating async database engine (pool_size=%s)", settings.DB_POOL_SIZE)
        engine_config = {
            **base_config,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
        }

    try:
        return create_async_engine(database_url, **engine_config)
    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


async_engine = create_async_database_engine()

AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    Writes are committed by the services through `atomic`; anything left
    open when the request fails is rolled back.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Async database error: {e}")
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def atomic(session: AsyncSession):
    """
    Run a block as one transaction on `session`.

    Commits when the block exits normally. Any exception rolls back every
    write made inside the block and is re-raised unchanged.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
