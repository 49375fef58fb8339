"""
Bill Writer

Persists a bill header with its line items and flips payment status.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from findclo.core.database.models import Bill
from findclo.core.logging import get_logger
from ..exceptions import DuplicatePeriodError
from ..models import BillingPeriod, StagedLineItem
from ..repositories import BillsRepository

logger = get_logger(__name__)


class BillWriter:
    """
    Writes bills inside the caller's session.

    The caller owns the transaction: header and line items become visible
    together on commit, or not at all on rollback.
    """

    def __init__(self, session: AsyncSession):
        self.bills_repository = BillsRepository(session)

    async def create_bill(
        self,
        brand_id: int,
        period: BillingPeriod,
        line_items: Sequence[StagedLineItem],
    ) -> Bill:
        """
        Create the brand's bill for ``period``.

        Raises:
            DuplicatePeriodError: a bill of the brand overlaps ``period``
        """
        existing = await self.bills_repository.find_overlapping_bill(brand_id, period)
        if existing is not None:
            raise DuplicatePeriodError(
                brand_id,
                period.start_date,
                period.end_date,
                existing_bill_id=existing.id,
            )

        bill = await self.bills_repository.insert_bill(brand_id, period, line_items)
        logger.info(
            "Bill created",
            bill_id=bill.id,
            brand_id=brand_id,
            period=str(period),
            amount=bill.amount,
            line_items=len(line_items),
        )
        return bill

    async def change_bill_status(self, bill_id: int) -> Bill:
        """
        Toggle ``is_paid``.

        Raises:
            BillNotFoundError: no bill with ``bill_id``
        """
        bill = await self.bills_repository.get_bill_for_update(bill_id)
        bill.is_paid = not bill.is_paid
        await self.bills_repository.session.flush()
        logger.info("Bill payment status changed", bill_id=bill_id, is_paid=bill.is_paid)
        return bill
