"""
Base exception classes for FindClo billing service
"""

from typing import Optional, Dict, Any


class FindCloException(Exception):
    """Base exception for all FindClo errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
            "exception_type": self.__class__.__name__,
        }


class NotFoundError(FindCloException):
    """Raised when a requested entity does not exist"""

    def __init__(
        self,
        message: str,
        entity: str = "unknown",
        entity_id: Optional[Any] = None,
        error_code: Optional[str] = "NOT_FOUND",
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            error_code=error_code,
            details={"entity": entity, "entity_id": entity_id},
            cause=cause,
        )
        self.entity = entity
        self.entity_id = entity_id
