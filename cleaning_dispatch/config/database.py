"""
Database configuration and connection management.
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.config.settings import settings

logger = get_logger(__name__)


def get_database_url() -> str:
    """Get database URL from settings."""
    return str(settings.DATABASE_URL)


def create_engine(database_url: str = None) -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    url = database_url or get_database_url()

    if url.startswith("sqlite"):
        return create_async_engine(url, echo=settings.DATABASE_ECHO, future=True)

    if settings.ENVIRONMENT == "test":
        return create_async_engine(
            url, echo=settings.DATABASE_ECHO, poolclass=NullPool, future=True
        )

    return create_async_engine(
        url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=True,
        future=True,
    )


@lru_cache(maxsize=1)
def get_async_session_factory(
    database_url: str = None,
) -> async_sessionmaker[AsyncSession]:
    """Get async session factory (created once per process)."""
    engine = create_engine(database_url)
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database session."""
    async with get_async_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def close_database_connections() -> None:
    """Dispose the engine behind the cached session factory."""
    if get_async_session_factory.cache_info().currsize == 0:
        return
    factory = get_async_session_factory()
    await factory.kw["bind"].dispose()
    get_async_session_factory.cache_clear()
    logger.info("Database connections closed")
