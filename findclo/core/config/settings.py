"""
Application settings and configuration management
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from findclo.shared.constants.app import (
    PROJECT_NAME,
    VERSION,
    DEFAULT_PORT,
    DEFAULT_DATABASE_URL,
    ENVIRONMENT_DEVELOPMENT,
)
from findclo.shared.constants.billing import (
    DEFAULT_BILLING_ADVISORY_LOCK_KEY,
    DEFAULT_DUPLICATE_PERIOD_MESSAGE,
    DEFAULT_MAX_CONCURRENT_BRANDS,
)
from findclo.core.exceptions import ConfigurationError, ConfigurationValidationError

_ENV_FILES = (".env.local", ".env")  # .env.local wins over .env


class DatabaseSettings(BaseSettings):
    """Database configuration settings"""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    DATABASE_URL: str = Field(default=DEFAULT_DATABASE_URL)
    # Control SQLAlchemy logging of SQL statements
    SQLALCHEMY_ECHO: bool = Field(default=False)
    DATABASE_CONNECT_TIMEOUT: int = Field(default=10)
    DATABASE_QUERY_TIMEOUT: int = Field(default=30)

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v):
        if not v:
            return DEFAULT_DATABASE_URL
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings"""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="console")
    LOG_FILE_ENABLED: bool = Field(default=False)
    LOG_DIR: str = Field(default="logs")
    LOG_MAX_FILE_SIZE: int = Field(default=10485760)  # 10MB
    LOG_BACKUP_COUNT: int = Field(default=5)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = (v or "INFO").upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        fmt = (v or "console").lower()
        if fmt not in ("console", "json"):
            raise ValueError(f"Unsupported log format: {v}")
        return fmt


class BillingSettings(BaseSettings):
    """Billing engine configuration settings"""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    BILLING_MAX_CONCURRENT_BRANDS: int = Field(default=DEFAULT_MAX_CONCURRENT_BRANDS)
    BILLING_ADVISORY_LOCK_KEY: int = Field(default=DEFAULT_BILLING_ADVISORY_LOCK_KEY)
    BILLING_DUPLICATE_PERIOD_MESSAGE: str = Field(
        default=DEFAULT_DUPLICATE_PERIOD_MESSAGE
    )


class Settings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App Configuration
    PROJECT_NAME: str = PROJECT_NAME
    VERSION: str = VERSION
    DEBUG: bool = Field(default=False)
    PORT: int = Field(default=DEFAULT_PORT)
    ENVIRONMENT: str = Field(default=ENVIRONMENT_DEVELOPMENT)

    # Sub-settings
    database: DatabaseSettings = DatabaseSettings()
    logging: LoggingSettings = LoggingSettings()
    billing: BillingSettings = BillingSettings()

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(default=["*"])

    def validate_configuration(self) -> None:
        """Validate the complete configuration"""
        if self.billing.BILLING_MAX_CONCURRENT_BRANDS < 1:
            raise ConfigurationValidationError(
                "BILLING_MAX_CONCURRENT_BRANDS must be at least 1",
                setting="BILLING_MAX_CONCURRENT_BRANDS",
                value=self.billing.BILLING_MAX_CONCURRENT_BRANDS,
            )
        if not self.billing.BILLING_DUPLICATE_PERIOD_MESSAGE:
            raise ConfigurationValidationError(
                "BILLING_DUPLICATE_PERIOD_MESSAGE must not be empty",
                setting="BILLING_DUPLICATE_PERIOD_MESSAGE",
            )


# Create settings instance
settings = Settings()

# Validate configuration on import
try:
    settings.validate_configuration()
except ConfigurationError as e:
    print(f"Configuration Error: {e}")
    raise
