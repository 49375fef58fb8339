"""
Logging configuration for FindClo billing service
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass
class FileHandlerConfig:
    """File handler configuration"""

    enabled: bool = False
    log_dir: str = "logs"
    max_file_size: int = 10485760  # 10MB
    backup_count: int = 5
    error_log_enabled: bool = True


@dataclass
class ConsoleHandlerConfig:
    """Console handler configuration"""

    enabled: bool = True
    level: str = "INFO"


class LoggingConfig(BaseModel):
    """Complete logging configuration"""

    level: str = "INFO"
    format: str = "console"  # console or json

    file: FileHandlerConfig = Field(default_factory=FileHandlerConfig)
    console: ConsoleHandlerConfig = Field(default_factory=ConsoleHandlerConfig)

    # Noisy third-party loggers capped at WARNING
    quiet_loggers: tuple = ("sqlalchemy.engine", "aiosqlite", "asyncio", "httpx")

    @classmethod
    def from_settings(cls, logging_settings) -> "LoggingConfig":
        """Build a config from ``LoggingSettings``"""
        return cls(
            level=logging_settings.LOG_LEVEL,
            format=logging_settings.LOG_FORMAT,
            file=FileHandlerConfig(
                enabled=logging_settings.LOG_FILE_ENABLED,
                log_dir=logging_settings.LOG_DIR,
                max_file_size=logging_settings.LOG_MAX_FILE_SIZE,
                backup_count=logging_settings.LOG_BACKUP_COUNT,
            ),
            console=ConsoleHandlerConfig(level=logging_settings.LOG_LEVEL),
        )
