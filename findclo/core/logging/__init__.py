"""
Logging module for FindClo billing service
"""

from .logger import get_logger, setup_logging, StructuredLogger
from .formatters import JSONFormatter, ConsoleFormatter, build_formatter
from .handlers import FileHandler, ConsoleHandler
from .config import LoggingConfig

__all__ = [
    "get_logger",
    "setup_logging",
    "StructuredLogger",
    "build_formatter",
    "JSONFormatter",
    "ConsoleFormatter",
    "FileHandler",
    "ConsoleHandler",
    "LoggingConfig",
]
