"""
Bill Reader

Bills with their nested line items, for the admin overview and for a
single brand.
"""

from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from findclo.core.database.models import Bill
from ..models import (
    BillLineItemView,
    BillPeriodView,
    BillView,
    month_bounds,
)
from ..repositories import BillsRepository, BrandRepository


def to_bill_view(bill: Bill, brand_name: str) -> BillView:
    return BillView(
        bill_id=bill.id,
        brand_id=bill.brand_id,
        brand_name=brand_name,
        is_paid=bill.is_paid,
        total_amount=bill.amount,
        created_at=bill.created_at,
        period=BillPeriodView(
            start_date=bill.period_start_date, end_date=bill.period_end_date
        ),
        billable_items=[
            BillLineItemView(
                item_name=item.billable_item.name,
                quantity=item.quantity,
                unit_price=item.billable_item_price,
                total_price=item.total,
            )
            for item in bill.items
        ],
    )


class BillReader:
    def __init__(self, session: AsyncSession):
        self.bills_repository = BillsRepository(session)
        self.brand_repository = BrandRepository(session)

    async def list_bills_with_details(self, period: str) -> List[BillView]:
        """
        Bills whose period starts in the ``YYYY-MM`` month, newest first.

        Raises:
            InvalidPeriodError: ``period`` is not a ``YYYY-MM`` key
        """
        rows = await self.bills_repository.list_bills_starting_in(month_bounds(period))
        return self._to_views(rows)

    async def list_brand_bills_with_details(self, brand_id: int) -> List[BillView]:
        """
        Every bill of the brand, newest first.

        Raises:
            BrandNotFoundError: no brand with ``brand_id``
        """
        await self.brand_repository.get_brand(brand_id)
        rows = await self.bills_repository.list_brand_bills(brand_id)
        return self._to_views(rows)

    @staticmethod
    def _to_views(rows: List[Tuple[Bill, str]]) -> List[BillView]:
        return [to_bill_view(bill, brand_name) for bill, brand_name in rows]
