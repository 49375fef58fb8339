"""
Brand Repository

Read-only access to the brand directory.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from findclo.core.database.models import Brand
from ..exceptions import BrandNotFoundError
from .base import translate_errors


class BrandRepository:
    """Repository for the brand directory"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_brands(self) -> List[Brand]:
        """Every brand, whatever its status, oldest first"""
        with translate_errors("list_brands"):
            result = await self.session.execute(select(Brand).order_by(Brand.id))
            return list(result.scalars().all())

    async def get_brand(self, brand_id: int) -> Brand:
        with translate_errors("get_brand", {"brand_id": brand_id}):
            brand = await self.session.get(Brand, brand_id)
        if brand is None:
            raise BrandNotFoundError(brand_id)
        return brand
