"""
Create all database tables from SQLAlchemy models
"""

import asyncio
import sys

from findclo.core.database.engine import get_engine
from findclo.core.database.models import Base
from findclo.core.logging import get_logger

logger = get_logger(__name__)


async def create_all_tables(engine=None) -> None:
    """Create all tables defined in SQLAlchemy models (idempotent)"""
    engine = engine or await get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", tables=len(Base.metadata.tables))


async def drop_all_tables(engine=None) -> None:
    """Drop all tables (use with caution!)"""
    engine = engine or await get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("Database tables dropped")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "drop":
        asyncio.run(drop_all_tables())
    else:
        asyncio.run(create_all_tables())
