"""
DateTime utility functions for FindClo billing service
"""

from datetime import date, datetime, time, timezone
from typing import Optional

from findclo.shared.constants.billing import PERIOD_MONTH_FORMAT


def now_utc() -> datetime:
    """Get current UTC datetime"""
    return datetime.now(timezone.utc)


def start_of_day(day: date) -> datetime:
    """Midnight UTC at the beginning of ``day``"""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a ``YYYY-MM-DD`` string (a full ISO timestamp is accepted and
    truncated to its date).

    Returns:
        date object or None if the value is empty or cannot be parsed
    """
    if not value:
        return None
    try:
        if len(value) == 10:
            return date.fromisoformat(value)
        if value.endswith("Z"):
            value = value.replace("Z", "+00:00")
        return datetime.fromisoformat(value).date()
    except (ValueError, TypeError):
        return None


def parse_month(value: Optional[str]) -> Optional[date]:
    """Parse a ``YYYY-MM`` string into the first day of that month"""
    if not value:
        return None
    try:
        return datetime.strptime(value, PERIOD_MONTH_FORMAT).date()
    except (ValueError, TypeError):
        return None
