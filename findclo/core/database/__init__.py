"""
Database module for FindClo billing service

Uses SQLAlchemy async for all database operations.
"""

from .engine import (
    get_engine,
    create_engine,
    close_engine,
    check_engine_health,
    get_database_url,
)

from .session import (
    build_session_factory,
    get_session_factory,
    reset_session_factory,
    session_scope,
    get_session_context,
    get_transaction_context,
)

__all__ = [
    "get_engine",
    "create_engine",
    "close_engine",
    "check_engine_health",
    "get_database_url",
    "build_session_factory",
    "get_session_factory",
    "reset_session_factory",
    "session_scope",
    "get_session_context",
    "get_transaction_context",
]
