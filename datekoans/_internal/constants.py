"""Internal constants for datekoans.

Unit sizes and calendar limits shared by the value types. This module
is not part of the public API.
"""

from __future__ import annotations

# Nanosecond sizes, the resolution of LocalTime and Duration
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000 * NANOS_PER_MICROSECOND
NANOS_PER_SECOND: int = 1_000 * NANOS_PER_MILLISECOND
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR

# Second sizes, the whole-number part of a Duration
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3_600
SECONDS_PER_DAY: int = 86_400

# Calendar
MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Month lengths in a common year, January first
DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# A 400-year Gregorian cycle has a fixed length
DAYS_PER_CYCLE: int = 146_097

# 1970-01-01 counted from 0001-01-01 as day 1
EPOCH_ORDINAL: int = 719_163


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_PER_CYCLE",
    "EPOCH_ORDINAL",
]
