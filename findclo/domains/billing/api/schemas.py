"""
Request/response models for the billing API
"""

from typing import Optional

from pydantic import Field

from ..models.billing_models import CamelModel


class GenerateBillsRequest(CamelModel):
    start_date: Optional[str] = Field(None, description="Period start, YYYY-MM-DD")
    end_date: Optional[str] = Field(None, description="Period end, YYYY-MM-DD")


class BillStatusResponse(CamelModel):
    bill_id: int
    is_paid: bool
