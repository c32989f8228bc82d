"""
Compact 2-byte dates: days since 1970-01-01, valid through 2149-06-06.

The value type is independent of the wall clock; only clock.py reads the
current time and the local timezone.
"""

from src.epochdate.clock import Clock, ClockConfig, today, today_utc
from src.epochdate.domain import (
    AMERICAN_SHORT,
    ISO,
    DateParseError,
    EpochDate,
    EpochDateError,
    OutOfRangeError,
    is_representable_seconds,
)

__all__ = [
    "EpochDate",
    "ISO",
    "AMERICAN_SHORT",
    "EpochDateError",
    "OutOfRangeError",
    "DateParseError",
    "is_representable_seconds",
    "Clock",
    "ClockConfig",
    "today",
    "today_utc",
]
