"""
Helpers module for FindClo billing service
"""

from .datetime_utils import (
    now_utc,
    parse_iso_date,
    parse_month,
    start_of_day,
)


__all__ = [
    "now_utc",
    "parse_iso_date",
    "parse_month",
    "start_of_day",
]
