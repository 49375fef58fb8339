"""
Bills Repository

SQL for the billing engine: interaction aggregation, bill headers and
their line items.
"""

from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from findclo.core.database.models import (
    Bill,
    BillItem,
    BillableItem,
    Brand,
    Product,
    ProductInteraction,
)
from ..exceptions import BillNotFoundError
from ..models import BillingPeriod, StagedLineItem
from .base import translate_errors


class BillsRepository:
    """Repository for bill-related database operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ============= AGGREGATION =============

    async def aggregate_interactions(
        self, brand_id: int, period: BillingPeriod
    ) -> List[StagedLineItem]:
        """
        Count the brand's interaction events per billable item inside
        ``period``. Kinds without a billable item are dropped by the
        inner join.
        """
        quantity = func.count(ProductInteraction.id).label("quantity")
        query = (
            select(BillableItem.id, BillableItem.name, BillableItem.price, quantity)
            .select_from(ProductInteraction)
            .join(BillableItem, ProductInteraction.interaction == BillableItem.name)
            .join(Product, ProductInteraction.product_id == Product.id)
            .where(
                Product.brand_id == brand_id,
                ProductInteraction.created_at >= period.starts_at,
                ProductInteraction.created_at < period.ends_before,
            )
            .group_by(BillableItem.id, BillableItem.name, BillableItem.price)
            .order_by(BillableItem.id)
        )

        with translate_errors("aggregate_interactions", {"brand_id": brand_id}):
            result = await self.session.execute(query)
            rows = result.all()

        return [
            StagedLineItem(
                billable_item_id=row.id,
                item_name=row.name,
                brand_id=brand_id,
                quantity=int(row.quantity),
                unit_price=Decimal(row.price),
            )
            for row in rows
        ]

    # ============= BILL HEADERS =============

    async def find_overlapping_bill(
        self, brand_id: int, period: BillingPeriod
    ) -> Optional[Bill]:
        """First bill of the brand whose period intersects ``period``"""
        query = (
            select(Bill)
            .where(
                Bill.brand_id == brand_id,
                Bill.period_start_date <= period.end_date,
                Bill.period_end_date >= period.start_date,
            )
            .order_by(Bill.id)
            .limit(1)
        )
        with translate_errors("find_overlapping_bill", {"brand_id": brand_id}):
            result = await self.session.execute(query)
            return result.scalar_one_or_none()

    async def insert_bill(
        self,
        brand_id: int,
        period: BillingPeriod,
        line_items: Sequence[StagedLineItem],
    ) -> Bill:
        """Insert a bill header and its line items; the caller commits"""
        amount = sum((item.total for item in line_items), Decimal("0.00"))
        bill = Bill(
            brand_id=brand_id,
            amount=amount,
            period_start_date=period.start_date,
            period_end_date=period.end_date,
            is_paid=False,
        )
        bill.items = [
            BillItem(
                billable_item_id=item.billable_item_id,
                brand_id=item.brand_id,
                quantity=item.quantity,
                total=item.total,
                billable_item_price=item.unit_price,
            )
            for item in line_items
        ]

        with translate_errors("insert_bill", {"brand_id": brand_id}):
            self.session.add(bill)
            await self.session.flush()
        return bill

    async def get_bill_for_update(self, bill_id: int) -> Bill:
        query = select(Bill).where(Bill.id == bill_id).with_for_update()
        with translate_errors("get_bill", {"bill_id": bill_id}):
            result = await self.session.execute(query)
            bill = result.scalar_one_or_none()
        if bill is None:
            raise BillNotFoundError(bill_id)
        return bill

    # ============= STAGING =============

    async def count_unattached_items(self) -> int:
        """Line items with no parent bill"""
        query = select(func.count(BillItem.id)).where(BillItem.bill_id.is_(None))
        with translate_errors("count_unattached_items"):
            result = await self.session.execute(query)
            return int(result.scalar_one())

    # ============= LISTING =============

    def _bills_with_details_query(self):
        return (
            select(Bill, Brand.name)
            .join(Brand, Bill.brand_id == Brand.id)
            .options(selectinload(Bill.items).selectinload(BillItem.billable_item))
            .order_by(Bill.id.desc())
        )

    async def list_bills_starting_in(
        self, period: BillingPeriod
    ) -> List[Tuple[Bill, str]]:
        """Bills whose period_start_date falls inside ``period``, newest first"""
        query = self._bills_with_details_query().where(
            Bill.period_start_date >= period.start_date,
            Bill.period_start_date <= period.end_date,
        )
        with translate_errors("list_bills_starting_in", {"period": str(period)}):
            result = await self.session.execute(query)
            return [(row[0], row[1]) for row in result.all()]

    async def list_brand_bills(self, brand_id: int) -> List[Tuple[Bill, str]]:
        """Every bill of one brand, newest first"""
        query = self._bills_with_details_query().where(Bill.brand_id == brand_id)
        with translate_errors("list_brand_bills", {"brand_id": brand_id}):
            result = await self.session.execute(query)
            return [(row[0], row[1]) for row in result.all()]
