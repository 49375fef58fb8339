"""
Billing Models Package
"""

from .billing_models import (
    Money,
    BillingPeriod,
    month_bounds,
    StagedLineItem,
    BrandBillingStatus,
    BrandBillingDetail,
    BatchBillingResult,
    BillLineItemView,
    BillPeriodView,
    BillView,
)

__all__ = [
    "Money",
    "BillingPeriod",
    "month_bounds",
    "StagedLineItem",
    "BrandBillingStatus",
    "BrandBillingDetail",
    "BatchBillingResult",
    "BillLineItemView",
    "BillPeriodView",
    "BillView",
]
