"""datekoans: koans about local dates and times.

datekoans teaches a local date/time API through small exercises. It
ships the API itself: immutable value types for dates, times and
amounts of time, with no time zones and no clocks.

Core Types:
    LocalDate: Calendar date (year, month, day)
    LocalTime: Time of day (hour, minute, second, nanosecond)
    LocalDateTime: A LocalDate and a LocalTime together
    Period: Calendar-based amount (years, months, days)
    Duration: Exact amount of time (seconds, nanoseconds)

Units:
    Month, DayOfWeek: Calendar enumerations
    ChronoUnit: Units of time (NANOS through MILLENNIA)
    ChronoField: Fields such as DAY_OF_YEAR and HOUR_OF_DAY

Formatting:
    DateTimeFormatter: Pattern-based formatting and parsing

Exceptions:
    DateKoansError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse a string
    PatternError: Malformed formatter pattern
    UnsupportedFieldError: Field not carried by the value
    UnsupportedUnitError: Unit not usable by the operation
    ArithmeticOverflowError: Result outside the supported range

Example:
    >>> from datekoans import LocalDate, Period
    >>> LocalDate(2016, 2, 2).plus(Period.of_months(3))
    LocalDate(2016, 5, 2)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datekoans.core.duration import Duration
from datekoans.core.localdate import LocalDate
from datekoans.core.localdatetime import LocalDateTime
from datekoans.core.localtime import LocalTime
from datekoans.core.period import Period

# Exceptions
from datekoans.errors import (
    ArithmeticOverflowError,
    DateKoansError,
    ParseError,
    PatternError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)

# Formatting
from datekoans.format.formatter import DateTimeFormatter

# Units
from datekoans.units.chronofield import ChronoField
from datekoans.units.chronounit import ChronoUnit
from datekoans.units.dayofweek import DayOfWeek
from datekoans.units.month import Month

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Period",
    # Units
    "ChronoField",
    "ChronoUnit",
    "DayOfWeek",
    "Month",
    # Formatting
    "DateTimeFormatter",
    # Exceptions
    "DateKoansError",
    "ValidationError",
    "ParseError",
    "PatternError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "ArithmeticOverflowError",
]
