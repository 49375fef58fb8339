"""
Billing Services Package
"""

from .period_aggregator import PeriodAggregator
from .bill_writer import BillWriter
from .bill_reader import BillReader
from .bill_batch_generator import BillBatchGenerator
from .billing_run_lock import BillingRunLock

__all__ = [
    "PeriodAggregator",
    "BillWriter",
    "BillReader",
    "BillBatchGenerator",
    "BillingRunLock",
]
