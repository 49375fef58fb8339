"""
Database-related exceptions
"""

from .base import FindCloException
from typing import Optional, Dict, Any


class DatabaseError(FindCloException):
    """Base exception for database errors"""

    def __init__(
        self,
        message: str,
        error_code: str = "DATABASE_ERROR",
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message, error_code=error_code, details=details, cause=cause
        )


class DatabaseConnectionError(DatabaseError):
    """Raised when database connection fails"""

    def __init__(
        self,
        message: str,
        connection_details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code="DATABASE_CONNECTION_ERROR",
            details={"connection_details": connection_details},
            cause=cause,
        )


class DatabaseQueryError(DatabaseError):
    """Raised when a database query fails"""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code="DATABASE_QUERY_ERROR",
            details={"operation": operation, "params": params},
            cause=cause,
        )
