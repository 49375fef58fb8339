"""
Pytest configuration for the billing tests.

Every test gets its own in-memory SQLite database built from the model
metadata.
"""

import os

# Must be set before findclo settings are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

import httpx
import pytest

from findclo.core.database import build_session_factory, create_engine
from findclo.core.database.create_tables import create_all_tables
from findclo.core.database.models import (
    BillableItem,
    Brand,
    BrandStatus,
    Product,
    ProductInteraction,
)
from findclo.shared.constants.billing import INTERACTION_CLICK, INTERACTION_VIEW


@pytest.fixture
async def engine():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


def at(year: int, month: int, day: int, hour: int = 12, minute: int = 0, second: int = 0):
    """UTC timestamp helper for interaction events"""
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


class Seeder:
    """Writes brands, products, the price catalog and interaction events"""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def catalog(self, prices: Dict[str, str]) -> Dict[str, int]:
        async with self.session_factory() as session:
            items = [BillableItem(name=name, price=Decimal(price)) for name, price in prices.items()]
            session.add_all(items)
            await session.commit()
            return {item.name: item.id for item in items}

    async def brand(
        self, name: str, status: BrandStatus = BrandStatus.ACTIVE
    ) -> Tuple[int, int]:
        """Create a brand with one product; returns (brand_id, product_id)"""
        async with self.session_factory() as session:
            brand = Brand(name=name, status=status)
            session.add(brand)
            await session.flush()
            product = Product(brand_id=brand.id, name=f"{name} tee")
            session.add(product)
            await session.commit()
            return brand.id, product.id

    async def interactions(
        self, product_id: int, kind: str, count: int, created_at: Optional[datetime] = None
    ) -> None:
        created_at = created_at or at(2024, 3, 15)
        async with self.session_factory() as session:
            session.add_all(
                [
                    ProductInteraction(product_id=product_id, interaction=kind, created_at=created_at)
                    for _ in range(count)
                ]
            )
            await session.commit()

    async def events_at(self, product_id: int, kind: str, timestamps: Iterable[datetime]) -> None:
        async with self.session_factory() as session:
            session.add_all(
                [
                    ProductInteraction(product_id=product_id, interaction=kind, created_at=ts)
                    for ts in timestamps
                ]
            )
            await session.commit()


@pytest.fixture
def seeder(session_factory):
    return Seeder(session_factory)


@pytest.fixture
async def march_catalog(seeder):
    """CLICK costs 10, VIEW costs 5, IMPRESSION is not billable"""
    return await seeder.catalog({INTERACTION_CLICK: "10.00", INTERACTION_VIEW: "5.00"})


@pytest.fixture
async def client(session_factory):
    from findclo.main import app
    from findclo.domains.billing.api.billing_api import get_billing_session_factory

    app.dependency_overrides[get_billing_session_factory] = lambda: session_factory
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
