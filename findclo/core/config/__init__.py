"""
Configuration module for FindClo billing service
"""

from .settings import settings, Settings
from .settings import DatabaseSettings, LoggingSettings, BillingSettings

__all__ = [
    "settings",
    "Settings",
    "DatabaseSettings",
    "LoggingSettings",
    "BillingSettings",
]
