"""
Base model class for SQLAlchemy models

Provides common functionality and base configuration for all models.
"""

from sqlalchemy import Column, Integer, TIMESTAMP, func
from sqlalchemy.orm import declarative_base, declared_attr

# Create the declarative base
Base = declarative_base()


class CreatedAtMixin:
    """Mixin for models that only record their creation time"""

    created_at = Column(
        "created_at",
        TIMESTAMP(timezone=True),
        default=func.current_timestamp(),
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """Mixin for models that need created_at and updated_at timestamps"""

    updated_at = Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
        nullable=False,
    )


class IDMixin:
    """Mixin for models with an autoincrement integer primary key"""

    @declared_attr
    def id(cls):
        return Column(Integer, primary_key=True, autoincrement=True)


class BaseModel(Base, IDMixin):
    """
    Base model class with common functionality.

    All models inherit from this class to get:
    - Autoincrement integer ID (newer rows always sort after older ones)
    - A readable repr
    """

    __abstract__ = True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
