"""
Period Aggregator

Computes a brand's billable line items for one period. Nothing is written:
staged items live in memory until the bill writer persists them together
with their bill.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from findclo.core.logging import get_logger
from ..models import BillingPeriod, StagedLineItem
from ..repositories import BillsRepository

logger = get_logger(__name__)


class PeriodAggregator:
    def __init__(self, session: AsyncSession):
        self.bills_repository = BillsRepository(session)

    async def aggregate(
        self, brand_id: int, period: BillingPeriod
    ) -> List[StagedLineItem]:
        """
        Quantity and total per billable item for the brand's interactions
        within ``period`` (both ends inclusive).

        A brand without matching interactions gets an empty list.
        """
        line_items = await self.bills_repository.aggregate_interactions(
            brand_id, period
        )
        logger.debug(
            "Aggregated billable interactions",
            brand_id=brand_id,
            period=str(period),
            line_items=len(line_items),
            quantity=sum(item.quantity for item in line_items),
        )
        return line_items
