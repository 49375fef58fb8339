"""
Billing domain exceptions
"""

from datetime import date
from typing import Optional

from findclo.core.exceptions import FindCloException, NotFoundError


class BillingError(FindCloException):
    """Base exception for billing engine errors"""


class DuplicatePeriodError(BillingError):
    """A bill of the brand already covers part of the requested period"""

    def __init__(
        self,
        brand_id: int,
        period_start: date,
        period_end: date,
        existing_bill_id: Optional[int] = None,
    ):
        super().__init__(
            f"Brand {brand_id} already has a bill overlapping "
            f"{period_start.isoformat()}..{period_end.isoformat()}",
            error_code="DUPLICATE_PERIOD",
            details={
                "brand_id": brand_id,
                "period_start": period_start.isoformat(),
                "period_end": period_end.isoformat(),
                "existing_bill_id": existing_bill_id,
            },
        )
        self.brand_id = brand_id
        self.existing_bill_id = existing_bill_id


class DirtyStagingStateError(BillingError):
    """Unattached bill items from an interrupted run are still present"""

    def __init__(self, unattached_items: int):
        super().__init__(
            f"{unattached_items} bill item(s) are not attached to any bill; "
            "clean them up before running a new billing batch",
            error_code="DIRTY_STAGING_STATE",
            details={"unattached_items": unattached_items},
        )
        self.unattached_items = unattached_items


class BillingRunInProgressError(BillingError):
    """Another billing batch holds the run lock"""

    def __init__(self, message: str = "A billing batch is already running"):
        super().__init__(message, error_code="BILLING_RUN_IN_PROGRESS")


class BillNotFoundError(NotFoundError):
    """No bill with the requested id"""

    def __init__(self, bill_id: int):
        super().__init__(
            f"Bill {bill_id} not found",
            entity="bill",
            entity_id=bill_id,
            error_code="BILL_NOT_FOUND",
        )


class BrandNotFoundError(NotFoundError):
    """No brand with the requested id"""

    def __init__(self, brand_id: int):
        super().__init__(
            f"Brand {brand_id} not found",
            entity="brand",
            entity_id=brand_id,
            error_code="BRAND_NOT_FOUND",
        )
