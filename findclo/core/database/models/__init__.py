"""
SQLAlchemy models for FindClo billing service
"""

from .base import Base
from .enums import BrandStatus

from .brand import Brand, Product
from .interaction import ProductInteraction
from .billing import BillableItem, Bill, BillItem

__all__ = [
    "Base",
    "BrandStatus",
    "Brand",
    "Product",
    "ProductInteraction",
    "BillableItem",
    "Bill",
    "BillItem",
]
