"""
SQLAlchemy async session management for FindClo billing service
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from findclo.core.logging import get_logger
from .engine import get_engine

logger = get_logger(__name__)

# Global session factory
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None
_session_factory_lock = asyncio.Lock()


def build_session_factory(engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to ``engine`` with the service defaults"""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep objects accessible after commit
        autoflush=True,
    )


async def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the async session factory"""
    global _session_factory

    if _session_factory is None:
        async with _session_factory_lock:
            if _session_factory is None:
                _session_factory = build_session_factory(await get_engine())

    return _session_factory


def reset_session_factory() -> None:
    """Forget the cached factory (used after the engine is closed)"""
    global _session_factory
    _session_factory = None


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession], commit: bool = False
) -> AsyncGenerator[AsyncSession, None]:
    """
    Open a session from ``session_factory``; roll back on error.

    With ``commit=True`` the session is committed when the block exits
    without an exception, making the block a single transaction.
    """
    session = session_factory()
    try:
        yield session
        if commit:
            await session.commit()
    except Exception as e:
        logger.warning(
            "Rolling back database session",
            error_type=type(e).__name__,
            error=str(e),
        )
        await session.rollback()
        raise
    finally:
        await session.close()


@asynccontextmanager
async def get_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database sessions with automatic cleanup.

    Usage:
        async with get_session_context() as session:
            result = await session.execute(query)
    """
    async with session_scope(await get_session_factory()) as session:
        yield session


@asynccontextmanager
async def get_transaction_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database transactions with automatic rollback on error.

    Usage:
        async with get_transaction_context() as session:
            # committed automatically when the block exits cleanly
            session.add(obj)
    """
    async with session_scope(await get_session_factory(), commit=True) as session:
        yield session
