"""
Billing API

Admin endpoints for running the billing batch and managing bills, plus
the brand-scoped bill listing.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from findclo.core.database.session import get_session_factory, session_scope
from findclo.core.exceptions import InvalidPeriodError
from findclo.core.logging import get_logger
from ..jobs import MonthlyBillingJob
from ..models import BatchBillingResult, BillingPeriod, BillView
from ..services import BillReader, BillWriter
from .schemas import BillStatusResponse, GenerateBillsRequest

router = APIRouter(prefix="/api", tags=["billing"])
logger = get_logger(__name__)


async def get_billing_session_factory() -> async_sessionmaker[AsyncSession]:
    return await get_session_factory()


@router.post(
    "/admin/bills/generate",
    response_model=BatchBillingResult,
    response_model_exclude_none=True,
)
async def generate_bills(
    request: GenerateBillsRequest,
    session_factory=Depends(get_billing_session_factory),
):
    """
    Bill every brand for the requested period.

    Always answers 200 with the summary once the batch ran, even when
    every brand failed; per-brand failures are in ``details``.
    """
    period = BillingPeriod.from_strings(request.start_date, request.end_date)
    logger.info("Billing batch requested", period=str(period))
    return await MonthlyBillingJob(session_factory).run(period)


@router.get("/admin/bills", response_model=List[BillView])
async def list_bills(
    period: Optional[str] = Query(None, description="Month key, YYYY-MM"),
    session_factory=Depends(get_billing_session_factory),
):
    """Bills whose period starts in ``period``, newest first"""
    if not period:
        raise InvalidPeriodError("Missing period parameter")
    async with session_scope(session_factory) as session:
        return await BillReader(session).list_bills_with_details(period)


@router.get("/brands/{brand_id}/bills", response_model=List[BillView])
async def list_brand_bills(
    brand_id: int,
    session_factory=Depends(get_billing_session_factory),
):
    """Every bill of one brand, newest first"""
    async with session_scope(session_factory) as session:
        return await BillReader(session).list_brand_bills_with_details(brand_id)


@router.put("/admin/bills/{bill_id}/status", response_model=BillStatusResponse)
async def change_bill_status(
    bill_id: int,
    session_factory=Depends(get_billing_session_factory),
):
    """Toggle the paid flag of a bill"""
    async with session_scope(session_factory, commit=True) as session:
        bill = await BillWriter(session).change_bill_status(bill_id)
        return BillStatusResponse(bill_id=bill.id, is_paid=bill.is_paid)
