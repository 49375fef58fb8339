"""
Product interaction model for SQLAlchemy

Append-only log written by product view/click tracking.
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import BaseModel, CreatedAtMixin


class ProductInteraction(BaseModel, CreatedAtMixin):
    """One shopper interaction (VIEW, CLICK, ...) with a product"""

    __tablename__ = "product_interactions"

    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False
    )
    interaction = Column(String(50), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="interactions")

    __table_args__ = (
        Index("ix_product_interactions_product_id", "product_id"),
        Index(
            "ix_product_interactions_product_kind_created_at",
            "product_id",
            "interaction",
            "created_at",
        ),
    )

    def __repr__(self) -> str:
        return f"<ProductInteraction(product_id={self.product_id}, interaction={self.interaction})>"
