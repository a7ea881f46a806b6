"""Utils module for standard-cache."""

from standard_cache.utils.clock import MAX_UTC, MIN_UTC, Clock, add_period, to_utc, utc_now
from standard_cache.utils.logging import get_logger, setup_logging

__all__ = [
    "MAX_UTC",
    "MIN_UTC",
    "Clock",
    "add_period",
    "get_logger",
    "setup_logging",
    "to_utc",
    "utc_now",
]
