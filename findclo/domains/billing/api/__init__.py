"""
Billing API Package
"""

from .billing_api import router

__all__ = ["router"]
