"""
Billing Repositories Package
"""

from .brand_repository import BrandRepository
from .bills_repository import BillsRepository

__all__ = ["BrandRepository", "BillsRepository"]
