"""
Configuration-related exceptions
"""

from typing import Any, Optional
from .base import FindCloException


class ConfigurationError(FindCloException):
    """Raised when the service configuration is invalid"""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        kwargs.setdefault("error_code", "CONFIGURATION_ERROR")
        kwargs.setdefault("details", {"setting": setting})
        super().__init__(message, **kwargs)
        self.setting = setting


class ConfigurationValidationError(ConfigurationError):
    """Raised when a single setting fails validation"""

    def __init__(self, message: str, setting: str, value: Any = None):
        super().__init__(
            message,
            setting=setting,
            error_code="CONFIGURATION_VALIDATION_ERROR",
            details={"setting": setting, "value": value},
        )
