"""
Validation-related exceptions
"""

from typing import Any, Optional
from .base import FindCloException


class ValidationError(FindCloException):
    """Base exception for validation errors"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_code: str = "VALIDATION_ERROR",
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details={"field": field, "value": value},
            **kwargs
        )
        self.field = field
        self.value = value


class InvalidPeriodError(ValidationError):
    """Raised when a billing period or month key cannot be used"""

    def __init__(self, message: str, value: Optional[Any] = None, **kwargs):
        super().__init__(
            message=message,
            field="period",
            value=value,
            error_code="INVALID_PERIOD",
            **kwargs
        )
