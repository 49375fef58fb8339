"""
Billing Models

Value types passed between the period aggregator, bill writer, batch
generator and bill reader.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from findclo.core.exceptions import InvalidPeriodError
from findclo.shared.constants.billing import PERIOD_MONTH_FORMAT
from findclo.shared.helpers import parse_iso_date, parse_month, start_of_day

# Decimal in Python, plain number in JSON payloads
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


@dataclass(frozen=True)
class BillingPeriod:
    """Inclusive [start_date, end_date] range billed as one unit"""

    start_date: date
    end_date: date

    def __post_init__(self):
        if isinstance(self.start_date, datetime) or isinstance(self.end_date, datetime):
            raise InvalidPeriodError(
                "Billing periods are expressed in whole days",
                value={"start_date": self.start_date, "end_date": self.end_date},
            )
        if self.end_date < self.start_date:
            raise InvalidPeriodError(
                "endDate must be equal to or after startDate",
                value={
                    "start_date": self.start_date.isoformat(),
                    "end_date": self.end_date.isoformat(),
                },
            )

    @classmethod
    def from_strings(
        cls, start_date: Optional[str], end_date: Optional[str]
    ) -> "BillingPeriod":
        """Build a period from ``YYYY-MM-DD`` strings"""
        if not start_date or not end_date:
            raise InvalidPeriodError(
                "Missing startDate or endDate parameters",
                value={"start_date": start_date, "end_date": end_date},
            )
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        if start is None or end is None:
            raise InvalidPeriodError(
                "Invalid startDate or endDate format. Must be YYYY-MM-DD",
                value={"start_date": start_date, "end_date": end_date},
            )
        return cls(start_date=start, end_date=end)

    @classmethod
    def for_month(cls, year: int, month: int) -> "BillingPeriod":
        last_day = calendar.monthrange(year, month)[1]
        return cls(start_date=date(year, month, 1), end_date=date(year, month, last_day))

    @classmethod
    def previous_month(cls, today: date) -> "BillingPeriod":
        """The full calendar month before ``today``'s month"""
        last_day_previous_month = today.replace(day=1) - timedelta(days=1)
        return cls.for_month(last_day_previous_month.year, last_day_previous_month.month)

    @property
    def starts_at(self) -> datetime:
        """First instant of the period (UTC)"""
        return start_of_day(self.start_date)

    @property
    def ends_before(self) -> datetime:
        """First instant after the period (UTC); the period's upper bound is exclusive of this"""
        return start_of_day(self.end_date + timedelta(days=1))

    @property
    def month_key(self) -> str:
        return self.start_date.strftime(PERIOD_MONTH_FORMAT)

    def overlaps(self, other: "BillingPeriod") -> bool:
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()}..{self.end_date.isoformat()}"


def month_bounds(month_key: str) -> BillingPeriod:
    """Calendar month for a ``YYYY-MM`` key"""
    first_day = parse_month(month_key)
    if first_day is None:
        raise InvalidPeriodError(
            "Invalid period format. Must be YYYY-MM", value=month_key
        )
    return BillingPeriod.for_month(first_day.year, first_day.month)


@dataclass(frozen=True)
class StagedLineItem:
    """A computed charge that is not attached to a persisted bill yet"""

    billable_item_id: int
    item_name: str
    brand_id: int
    quantity: int
    unit_price: Decimal

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity


class BrandBillingStatus(str, Enum):
    """Per-brand outcome of a batch billing run"""

    SUCCESS = "success"
    FAILED = "failed"


class CamelModel(BaseModel):
    """Pydantic base that reads snake_case and writes camelCase"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class BrandBillingDetail(CamelModel):
    brand_id: int
    brand_name: str
    status: BrandBillingStatus
    error: Optional[str] = None
    bill_id: Optional[int] = None
    amount: Optional[Money] = None


class BatchBillingResult(CamelModel):
    """Summary of one batch run across every brand"""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    details: List[BrandBillingDetail] = Field(default_factory=list)

    def record(self, detail: BrandBillingDetail) -> None:
        self.details.append(detail)
        if detail.status == BrandBillingStatus.SUCCESS:
            self.succeeded += 1
        else:
            self.failed += 1


class BillLineItemView(CamelModel):
    item_name: str
    quantity: int
    unit_price: Money
    total_price: Money


class BillPeriodView(CamelModel):
    start_date: date
    end_date: date


class BillView(CamelModel):
    """A bill with its brand name and nested line items"""

    bill_id: int
    brand_id: int
    brand_name: str
    is_paid: bool
    total_amount: Money
    created_at: Optional[datetime] = None
    period: BillPeriodView
    billable_items: List[BillLineItemView] = Field(default_factory=list)
