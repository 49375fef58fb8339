"""
Monthly Billing Job

Runs the billing batch for every brand, by default over the previous
calendar month. Used by the admin endpoint and by the billing CLI.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from findclo.core.database.session import get_session_factory
from findclo.core.logging import get_logger
from findclo.shared.helpers import now_utc
from ..models import BatchBillingResult, BillingPeriod
from ..services import BillBatchGenerator, BillingRunLock

logger = get_logger(__name__)


class MonthlyBillingJob:
    def __init__(
        self,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        max_concurrent_brands: Optional[int] = None,
    ):
        self.session_factory = session_factory
        self.max_concurrent_brands = max_concurrent_brands

    async def _get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self.session_factory is None:
            self.session_factory = await get_session_factory()
        return self.session_factory

    async def run(self, period: Optional[BillingPeriod] = None) -> BatchBillingResult:
        """
        Bill every brand for ``period`` (previous month when omitted).

        Raises:
            BillingRunInProgressError: another batch is running
            DirtyStagingStateError: unattached line items block the run
        """
        session_factory = await self._get_session_factory()
        if period is None:
            period = BillingPeriod.previous_month(now_utc().date())

        job_start_time = now_utc()
        logger.info("Starting monthly billing job", period=str(period))

        async with BillingRunLock(session_factory).acquire():
            generator = BillBatchGenerator(
                session_factory, max_concurrent_brands=self.max_concurrent_brands
            )
            result = await generator.generate_bill(period)

        duration = (now_utc() - job_start_time).total_seconds()
        logger.info(
            f"Monthly billing job completed: {result.succeeded}/{result.total} brands billed, "
            f"duration: {duration:.2f}s",
            period=str(period),
            failed=result.failed,
        )
        return result
