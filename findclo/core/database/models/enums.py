"""
Enum models for SQLAlchemy

Defines all database enums used in the application.
"""

from enum import Enum


class BrandStatus(str, Enum):
    """Brand listing status"""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
