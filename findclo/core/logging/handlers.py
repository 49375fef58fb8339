"""
Logging handlers for FindClo billing service
"""

import os
import logging
import logging.handlers

from .formatters import build_formatter


class FileHandler:
    """File handler factory for different log types"""

    @staticmethod
    def create_app_handler(
        log_dir: str = "logs",
        max_bytes: int = 10485760,  # 10MB
        backup_count: int = 5,
        level: int = logging.INFO,
        formatter_type: str = "console",
    ) -> logging.handlers.RotatingFileHandler:
        """Create application log handler"""
        os.makedirs(log_dir, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, "app.log"),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        handler.setLevel(level)
        handler.setFormatter(build_formatter(formatter_type))
        return handler

    @staticmethod
    def create_error_handler(
        log_dir: str = "logs",
        max_bytes: int = 10485760,  # 10MB
        backup_count: int = 5,
        formatter_type: str = "console",
    ) -> logging.handlers.RotatingFileHandler:
        """Create error log handler"""
        os.makedirs(log_dir, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, "errors.log"),
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        handler.setLevel(logging.ERROR)
        handler.setFormatter(build_formatter(formatter_type))
        return handler


class ConsoleHandler:
    """Console handler factory"""

    @staticmethod
    def create_handler(
        level: int = logging.INFO, formatter_type: str = "console"
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        is_terminal = getattr(handler.stream, "isatty", lambda: False)()
        handler.setFormatter(build_formatter(formatter_type, use_colors=is_terminal))
        return handler
