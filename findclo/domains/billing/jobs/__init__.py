"""
Billing Jobs Package
"""

from .monthly_billing_job import MonthlyBillingJob

__all__ = ["MonthlyBillingJob"]
