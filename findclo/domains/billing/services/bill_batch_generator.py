"""
Bill Batch Generator

Bills every brand for one period. Each brand gets its own session and
transaction; a failing brand is reported in the summary and never stops
the rest of the batch.
"""

import asyncio
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from findclo.core.config.settings import settings
from findclo.core.database.session import session_scope
from findclo.core.exceptions import ConfigurationValidationError, FindCloException
from findclo.core.logging import get_logger
from findclo.shared.constants.billing import DEFAULT_UNKNOWN_ERROR_MESSAGE
from ..exceptions import DirtyStagingStateError, DuplicatePeriodError
from ..models import (
    BatchBillingResult,
    BillingPeriod,
    BrandBillingDetail,
    BrandBillingStatus,
)
from ..repositories import BillsRepository, BrandRepository
from .bill_writer import BillWriter
from .period_aggregator import PeriodAggregator

logger = get_logger(__name__)


def describe_error(error: Exception) -> str:
    """Human-readable message for a per-brand failure"""
    if isinstance(error, FindCloException):
        message = error.message
    else:
        message = str(error)
    return message or DEFAULT_UNKNOWN_ERROR_MESSAGE


class BillBatchGenerator:
    """
    Runs the period aggregator and bill writer for every brand.

    Callers must hold the billing run lock; see ``BillingRunLock``.
    """

    # SQLite sessions share one connection (StaticPool for in-memory
    # databases, a single writer otherwise), so per-brand transactions
    # would commit and roll back each other.
    SERIAL_DIALECTS = ("sqlite",)

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        max_concurrent_brands: Optional[int] = None,
        duplicate_period_message: Optional[str] = None,
    ):
        self.session_factory = session_factory
        self.max_concurrent_brands = (
            max_concurrent_brands or settings.billing.BILLING_MAX_CONCURRENT_BRANDS
        )
        if self.max_concurrent_brands < 1:
            raise ConfigurationValidationError(
                "max_concurrent_brands must be at least 1",
                setting="max_concurrent_brands",
                value=self.max_concurrent_brands,
            )
        self.duplicate_period_message = (
            duplicate_period_message
            or settings.billing.BILLING_DUPLICATE_PERIOD_MESSAGE
        )

    async def generate_bill(self, period: BillingPeriod) -> BatchBillingResult:
        """
        Create one bill per brand for ``period``.

        Raises:
            DirtyStagingStateError: unattached line items exist; no brand
                is processed
        """
        async with session_scope(self.session_factory) as session:
            unattached = await BillsRepository(session).count_unattached_items()
            if unattached:
                raise DirtyStagingStateError(unattached)
            brands = [
                (brand.id, brand.name)
                for brand in await BrandRepository(session).list_brands()
            ]
            pool_size = self._pool_size(session.bind.dialect.name)

        logger.info(
            "Starting billing batch",
            period=str(period),
            brands=len(brands),
            max_concurrent_brands=pool_size,
        )

        semaphore = asyncio.Semaphore(pool_size)
        details = await asyncio.gather(
            *[
                self._bill_brand(semaphore, brand_id, brand_name, period)
                for brand_id, brand_name in brands
            ]
        )

        result = BatchBillingResult(total=len(brands))
        for detail in details:
            result.record(detail)

        logger.info(
            "Billing batch completed",
            period=str(period),
            total=result.total,
            succeeded=result.succeeded,
            failed=result.failed,
        )
        return result

    def _pool_size(self, dialect_name: str) -> int:
        """Brands billed at once on this database"""
        if dialect_name in self.SERIAL_DIALECTS and self.max_concurrent_brands > 1:
            logger.warning(
                "Database does not isolate concurrent transactions; billing brands one at a time",
                dialect=dialect_name,
                max_concurrent_brands=self.max_concurrent_brands,
            )
            return 1
        return self.max_concurrent_brands

    async def _bill_brand(
        self,
        semaphore: asyncio.Semaphore,
        brand_id: int,
        brand_name: str,
        period: BillingPeriod,
    ) -> BrandBillingDetail:
        async with semaphore:
            try:
                async with session_scope(self.session_factory, commit=True) as session:
                    line_items = await PeriodAggregator(session).aggregate(
                        brand_id, period
                    )
                    bill = await BillWriter(session).create_bill(
                        brand_id, period, line_items
                    )
                    bill_id, amount = bill.id, bill.amount
            except DuplicatePeriodError as e:
                logger.warning(
                    "Brand already billed for period",
                    brand_id=brand_id,
                    period=str(period),
                    existing_bill_id=e.existing_bill_id,
                )
                return BrandBillingDetail(
                    brand_id=brand_id,
                    brand_name=brand_name,
                    status=BrandBillingStatus.FAILED,
                    error=self.duplicate_period_message,
                )
            except Exception as e:
                logger.exception(
                    "Billing failed for brand",
                    brand_id=brand_id,
                    period=str(period),
                    error_type=type(e).__name__,
                )
                return BrandBillingDetail(
                    brand_id=brand_id,
                    brand_name=brand_name,
                    status=BrandBillingStatus.FAILED,
                    error=describe_error(e),
                )

        return BrandBillingDetail(
            brand_id=brand_id,
            brand_name=brand_name,
            status=BrandBillingStatus.SUCCESS,
            bill_id=bill_id,
            amount=amount,
        )
