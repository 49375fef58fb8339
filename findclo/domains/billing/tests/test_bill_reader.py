"""
Tests for listing bills with their line items
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import update

from findclo.core.database.models import BillableItem
from findclo.core.exceptions import InvalidPeriodError, NotFoundError
from findclo.domains.billing.exceptions import BrandNotFoundError
from findclo.domains.billing.models import BillingPeriod
from findclo.domains.billing.services import BillBatchGenerator, BillReader
from findclo.shared.constants.billing import INTERACTION_CLICK, INTERACTION_VIEW

MARCH = BillingPeriod(date(2024, 3, 1), date(2024, 3, 31))
APRIL = BillingPeriod(date(2024, 4, 1), date(2024, 4, 30))


@pytest.fixture
async def billed_march(seeder, march_catalog, session_factory):
    """Acme with 5 clicks and 2 views; Quiet with no interactions"""
    acme_id, product_id = await seeder.brand("Acme")
    quiet_id, _ = await seeder.brand("Quiet")
    await seeder.interactions(product_id, INTERACTION_CLICK, 5)
    await seeder.interactions(product_id, INTERACTION_VIEW, 2)
    await BillBatchGenerator(session_factory).generate_bill(MARCH)
    return acme_id, quiet_id


class TestListBillsWithDetails:
    """Admin overview for one month"""

    async def test_newest_first_with_line_items(self, billed_march, session_factory):
        acme_id, quiet_id = billed_march

        async with session_factory() as session:
            bills = await BillReader(session).list_bills_with_details("2024-03")

        assert [bill.brand_id for bill in bills] == [quiet_id, acme_id]
        assert bills[0].bill_id > bills[1].bill_id

        acme = bills[1]
        assert acme.brand_name == "Acme"
        assert acme.total_amount == Decimal("60.00")
        assert acme.is_paid is False
        assert acme.period.start_date == date(2024, 3, 1)
        assert acme.period.end_date == date(2024, 3, 31)
        assert [
            (item.item_name, item.quantity, item.unit_price, item.total_price)
            for item in acme.billable_items
        ] == [
            ("CLICK", 5, Decimal("10.00"), Decimal("50.00")),
            ("VIEW", 2, Decimal("5.00"), Decimal("10.00")),
        ]

    async def test_bill_without_items_is_listed(self, billed_march, session_factory):
        _, quiet_id = billed_march

        async with session_factory() as session:
            bills = await BillReader(session).list_bills_with_details("2024-03")

        quiet = next(bill for bill in bills if bill.brand_id == quiet_id)
        assert quiet.billable_items == []
        assert quiet.total_amount == Decimal("0")

    async def test_month_without_bills_is_empty(self, billed_march, session_factory):
        async with session_factory() as session:
            assert await BillReader(session).list_bills_with_details("2024-04") == []

    async def test_month_is_matched_on_period_start(self, billed_march, session_factory):
        await BillBatchGenerator(session_factory).generate_bill(APRIL)

        async with session_factory() as session:
            reader = BillReader(session)
            march = await reader.list_bills_with_details("2024-03")
            april = await reader.list_bills_with_details("2024-04")

        assert {bill.period.start_date for bill in march} == {date(2024, 3, 1)}
        assert {bill.period.start_date for bill in april} == {date(2024, 4, 1)}

    async def test_unit_price_is_the_price_at_billing_time(self, billed_march, session_factory):
        async with session_factory() as session:
            await session.execute(
                update(BillableItem)
                .where(BillableItem.name == "CLICK")
                .values(price=Decimal("99.00"))
            )
            await session.commit()

        async with session_factory() as session:
            bills = await BillReader(session).list_bills_with_details("2024-03")

        click = next(
            item for bill in bills for item in bill.billable_items if item.item_name == "CLICK"
        )
        assert click.unit_price == Decimal("10.00")

    async def test_malformed_period_is_rejected(self, session_factory):
        async with session_factory() as session:
            with pytest.raises(InvalidPeriodError):
                await BillReader(session).list_bills_with_details("03/2024")


class TestListBrandBillsWithDetails:
    """Every bill of one brand"""

    async def test_across_periods(self, billed_march, session_factory):
        acme_id, _ = billed_march
        await BillBatchGenerator(session_factory).generate_bill(APRIL)

        async with session_factory() as session:
            bills = await BillReader(session).list_brand_bills_with_details(acme_id)

        assert [bill.period.start_date for bill in bills] == [date(2024, 4, 1), date(2024, 3, 1)]
        assert all(bill.brand_name == "Acme" for bill in bills)

    async def test_known_brand_without_bills(self, seeder, session_factory):
        brand_id, _ = await seeder.brand("Fresh")

        async with session_factory() as session:
            assert await BillReader(session).list_brand_bills_with_details(brand_id) == []

    async def test_unknown_brand(self, session_factory):
        async with session_factory() as session:
            with pytest.raises(BrandNotFoundError) as exc_info:
                await BillReader(session).list_brand_bills_with_details(404)
        assert isinstance(exc_info.value, NotFoundError)
