"""
Billing constants
"""

# Interaction kinds recorded by product tracking. Only kinds that have a
# matching row in billable_items are charged.
INTERACTION_VIEW = "VIEW"
INTERACTION_CLICK = "CLICK"
INTERACTION_IMPRESSION = "IMPRESSION"

DEFAULT_DUPLICATE_PERIOD_MESSAGE = "period already billed"
DEFAULT_UNKNOWN_ERROR_MESSAGE = "unknown error"
DEFAULT_MAX_CONCURRENT_BRANDS = 1

# Arbitrary 64-bit key for pg_try_advisory_lock; "FNDCBILL" in ASCII.
DEFAULT_BILLING_ADVISORY_LOCK_KEY = 0x464E4443_42494C4C

PERIOD_MONTH_FORMAT = "%Y-%m"

__all__ = [
    "INTERACTION_VIEW",
    "INTERACTION_CLICK",
    "INTERACTION_IMPRESSION",
    "DEFAULT_DUPLICATE_PERIOD_MESSAGE",
    "DEFAULT_UNKNOWN_ERROR_MESSAGE",
    "DEFAULT_MAX_CONCURRENT_BRANDS",
    "DEFAULT_BILLING_ADVISORY_LOCK_KEY",
    "PERIOD_MONTH_FORMAT",
]
