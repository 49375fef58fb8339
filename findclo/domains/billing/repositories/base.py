"""
Shared repository plumbing
"""

from contextlib import contextmanager
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from findclo.core.exceptions import DatabaseQueryError
from findclo.core.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def translate_errors(operation: str, params: Optional[Dict[str, Any]] = None):
    """Re-raise SQLAlchemy failures as DatabaseQueryError"""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            f"Database operation {operation} failed",
            error_type=type(e).__name__,
            error=str(e),
        )
        raise DatabaseQueryError(
            f"Database operation {operation} failed: {e}",
            operation=operation,
            params=params,
            cause=e,
        ) from e
