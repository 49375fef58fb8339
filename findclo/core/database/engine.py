"""
SQLAlchemy async engine configuration for FindClo billing service

Single shared async engine with:
- Async driver resolution from plain database URLs
- SQLite pragmas for local development and tests
- Health checks and explicit lifecycle management
"""

import asyncio
from typing import Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.pool import NullPool, StaticPool

from findclo.core.config.settings import settings
from findclo.core.logging import get_logger

logger = get_logger(__name__)

# Global engine instance
_engine: Optional[AsyncEngine] = None
_engine_lock = asyncio.Lock()


def get_database_url(database_url: Optional[str] = None) -> str:
    """Get the database URL with proper async driver"""
    database_url = database_url or settings.database.DATABASE_URL

    if database_url.startswith("postgresql://"):
        database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif database_url.startswith("sqlite://"):
        database_url = database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)

    return database_url


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create SQLAlchemy async engine for ``database_url`` (defaults to settings)"""

    database_url = get_database_url(database_url)
    is_sqlite = "sqlite" in database_url

    engine_kwargs = {
        "url": database_url,
        "echo": settings.database.SQLALCHEMY_ECHO,
    }

    if is_sqlite:
        if ":memory:" in database_url or database_url.endswith("://"):
            # Every session must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["poolclass"] = NullPool
        if "asyncpg" in database_url:
            engine_kwargs["connect_args"] = {
                "command_timeout": settings.database.DATABASE_QUERY_TIMEOUT,
                "timeout": settings.database.DATABASE_CONNECT_TIMEOUT,
                "server_settings": {"application_name": "findclo-billing"},
            }

    engine = create_async_engine(**engine_kwargs)

    if is_sqlite:

        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """Enforce foreign keys on SQLite connections"""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


async def get_engine() -> AsyncEngine:
    """Get or create the shared async database engine"""
    global _engine

    if _engine is None:
        async with _engine_lock:
            if _engine is None:
                _engine = create_engine()
                logger.info(
                    "Database engine created",
                    dialect=_engine.dialect.name,
                )

    return _engine


async def check_engine_health() -> bool:
    """Check if the database engine is healthy"""
    try:
        engine = await get_engine()
        async with engine.connect() as conn:
            await asyncio.wait_for(
                conn.execute(text("SELECT 1")),
                timeout=settings.database.DATABASE_CONNECT_TIMEOUT,
            )
        return True
    except Exception as e:
        logger.warning(f"Database engine health check failed: {e}")
        return False


async def close_engine() -> None:
    """Dispose the shared engine"""
    global _engine

    if _engine is not None:
        try:
            await _engine.dispose()
        finally:
            _engine = None
