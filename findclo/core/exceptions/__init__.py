"""
Custom exceptions for the FindClo billing service
"""

from .base import FindCloException, NotFoundError
from .config import ConfigurationError, ConfigurationValidationError
from .database import DatabaseError, DatabaseConnectionError, DatabaseQueryError
from .validation import ValidationError, InvalidPeriodError

__all__ = [
    "FindCloException",
    "NotFoundError",
    "ConfigurationError",
    "ConfigurationValidationError",
    "DatabaseError",
    "DatabaseConnectionError",
    "DatabaseQueryError",
    "ValidationError",
    "InvalidPeriodError",
]
