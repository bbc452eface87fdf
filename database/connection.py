"""
Database connection module - Async SQLAlchemy engine and session management.

Provides async database engine and session factory for the application.
All database operations should use get_async_session() context manager.
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shared.config import get_settings

# Anything that opens a session: get_async_session or a test factory
SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]

settings = get_settings()

# Engine creation is lazy on the driver side: no connection until first use
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False,
)


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for database sessions.

    Usage:
        async with get_async_session() as session:
            result = await session.execute(select(Tag))
            tags = result.scalars().all()

    Yields:
        AsyncSession: Database session instance
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def make_session_factory(bind: AsyncEngine) -> SessionFactory:
    """
    Build a get_async_session-style factory bound to another engine.

    Used by tests and by callers that manage their own engine.
    """
    maker = async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    @asynccontextmanager
    async def session_factory() -> AsyncGenerator[AsyncSession, None]:
        async with maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    return session_factory


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Initialize database by creating all tables.

    NOTE: In production, use Alembic migrations instead.
    This function is useful for testing or initial setup.
    """
    from database.models import Base

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """
    Close database engine and all connections.

    Call this during application shutdown.
    """
    await engine.dispose()
