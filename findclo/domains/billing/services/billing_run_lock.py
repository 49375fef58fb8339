"""
Billing run lock

At most one billing batch may run at a time. Inside one process this is an
asyncio lock; on PostgreSQL a session-level advisory lock extends it to
every process sharing the database.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from findclo.core.config.settings import settings
from findclo.core.database.session import session_scope
from findclo.core.logging import get_logger
from ..exceptions import BillingRunInProgressError

logger = get_logger(__name__)

_process_lock = asyncio.Lock()


class BillingRunLock:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        lock_key: Optional[int] = None,
    ):
        self.session_factory = session_factory
        self.lock_key = (
            lock_key
            if lock_key is not None
            else settings.billing.BILLING_ADVISORY_LOCK_KEY
        )

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[None, None]:
        """
        Hold the run lock for the duration of the block.

        Raises:
            BillingRunInProgressError: another batch holds the lock
        """
        if _process_lock.locked():
            raise BillingRunInProgressError()

        async with _process_lock:
            async with session_scope(self.session_factory) as session:
                if session.bind.dialect.name != "postgresql":
                    yield
                    return

                await self._acquire_advisory_lock(session)
                try:
                    yield
                finally:
                    await session.execute(
                        text("SELECT pg_advisory_unlock(:key)"), {"key": self.lock_key}
                    )
                    logger.debug("Released billing advisory lock", key=self.lock_key)

    async def _acquire_advisory_lock(self, session: AsyncSession) -> None:
        result = await session.execute(
            text("SELECT pg_try_advisory_lock(:key)"), {"key": self.lock_key}
        )
        if not result.scalar():
            raise BillingRunInProgressError(
                "A billing batch is already running in another process"
            )
        logger.debug("Acquired billing advisory lock", key=self.lock_key)
