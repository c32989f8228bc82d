"""
Domain models and value objects.

Contains the EpochDate value type, day-unit conversions, layouts and errors.
"""

from src.epochdate.domain.codecs import SupportsJSON, SupportsText
from src.epochdate.domain.epoch_date import EpochDate, resolve_zone
from src.epochdate.domain.errors import DateParseError, EpochDateError, OutOfRangeError
from src.epochdate.domain.layouts import (
    AMERICAN_SHORT,
    ISO,
    ISO_INSTANT,
    format_layout,
    layout_pattern,
    parse_layout,
    strptime_layout,
)
from src.epochdate.domain.units import (
    MAX_DAYS,
    MAX_UNIX_SECONDS,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    civil_to_unix_seconds,
    days_to_unix_nanos,
    days_to_unix_seconds,
    is_representable_seconds,
    unix_seconds_to_days,
    validate_days,
    validate_unix_seconds,
)

__all__ = [
    # Units module
    "SECONDS_PER_DAY",
    "NANOS_PER_SECOND",
    "MAX_DAYS",
    "MAX_UNIX_SECONDS",
    "is_representable_seconds",
    "validate_unix_seconds",
    "validate_days",
    "unix_seconds_to_days",
    "days_to_unix_seconds",
    "days_to_unix_nanos",
    "civil_to_unix_seconds",
    # Layouts
    "ISO",
    "AMERICAN_SHORT",
    "ISO_INSTANT",
    "format_layout",
    "layout_pattern",
    "parse_layout",
    "strptime_layout",
    # Errors
    "EpochDateError",
    "OutOfRangeError",
    "DateParseError",
    # Capabilities
    "SupportsText",
    "SupportsJSON",
    # EpochDate
    "EpochDate",
    "resolve_zone",
]
