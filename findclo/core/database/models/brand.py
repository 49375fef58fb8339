"""
Brand and product models for SQLAlchemy

Owned by brand management; the billing engine only reads them.
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship

from .base import BaseModel, TimestampMixin
from .enums import BrandStatus


class Brand(BaseModel, TimestampMixin):
    """Brand selling on the marketplace"""

    __tablename__ = "brands"

    name = Column(String(255), nullable=False)
    status = Column(
        SQLEnum(BrandStatus, name="brand_status_enum", native_enum=False),
        nullable=False,
        default=BrandStatus.ACTIVE,
        index=True,
    )

    # Relationships
    products = relationship("Product", back_populates="brand")
    bills = relationship("Bill", back_populates="brand")

    def __repr__(self) -> str:
        return f"<Brand(id={self.id}, name={self.name}, status={self.status})>"


class Product(BaseModel, TimestampMixin):
    """Product listed by a brand"""

    __tablename__ = "products"

    brand_id = Column(
        Integer, ForeignKey("brands.id", ondelete="CASCADE"), nullable=False
    )
    name = Column(String(255), nullable=False)

    # Relationships
    brand = relationship("Brand", back_populates="products")
    interactions = relationship("ProductInteraction", back_populates="product")

    __table_args__ = (Index("ix_products_brand_id", "brand_id"),)
