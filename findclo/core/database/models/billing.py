"""
Billing models for SQLAlchemy

Price catalog, bill headers and their line items.
"""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    Integer,
    Numeric,
    Boolean,
    Date,
    ForeignKey,
    Index,
)
from sqlalchemy.orm import relationship

from .base import BaseModel, CreatedAtMixin, TimestampMixin


class BillableItem(BaseModel):
    """
    Price list entry.

    ``name`` matches a ProductInteraction.interaction kind; interaction kinds
    without an entry here are never billed.
    """

    __tablename__ = "billable_items"

    name = Column(String(50), nullable=False, unique=True)
    price = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))

    def __repr__(self) -> str:
        return f"<BillableItem(name={self.name}, price={self.price})>"


class Bill(BaseModel, TimestampMixin):
    """
    Monthly invoice for one brand.

    No two bills of the same brand may have overlapping
    [period_start_date, period_end_date] ranges.
    """

    __tablename__ = "bills"

    brand_id = Column(
        Integer, ForeignKey("brands.id", ondelete="CASCADE"), nullable=False
    )
    amount = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))
    period_start_date = Column(Date, nullable=False)
    period_end_date = Column(Date, nullable=False)
    is_paid = Column(Boolean, nullable=False, default=False)

    # Relationships
    brand = relationship("Brand", back_populates="bills")
    items = relationship(
        "BillItem",
        back_populates="bill",
        cascade="all, delete-orphan",
        order_by="BillItem.id",
    )

    __table_args__ = (
        Index("ix_bills_brand_period", "brand_id", "period_start_date", "period_end_date"),
        Index("ix_bills_period_start_date", "period_start_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<Bill(id={self.id}, brand_id={self.brand_id}, amount={self.amount}, "
            f"period={self.period_start_date}..{self.period_end_date}, is_paid={self.is_paid})>"
        )


class BillItem(BaseModel, CreatedAtMixin):
    """
    Line item of a bill.

    ``bill_id`` is nullable only for rows left behind by older deployments
    that staged items before their bill existed; new rows are always
    inserted together with their bill. The batch generator refuses to run
    while any such unattached row exists.
    """

    __tablename__ = "bill_items"

    bill_id = Column(
        Integer, ForeignKey("bills.id", ondelete="CASCADE"), nullable=True
    )
    billable_item_id = Column(
        Integer, ForeignKey("billable_items.id"), nullable=False
    )
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    total = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))
    billable_item_price = Column(Numeric(12, 2), nullable=False)

    # Relationships
    bill = relationship("Bill", back_populates="items")
    billable_item = relationship("BillableItem")

    __table_args__ = (
        Index("ix_bill_items_bill_id", "bill_id"),
        Index("ix_bill_items_brand_id", "brand_id"),
    )
