"""ChronoField enumeration for the fields of dates and times.

A field is one readable component, such as the day-of-year of a date or
the minute-of-hour of a time. Every value type answers ``get(field)``
for the fields it carries, alongside the dedicated accessors such as
``time.hour``.
"""

from __future__ import annotations

from enum import Enum

from datekoans._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    SECONDS_PER_DAY,
)


class ChronoField(Enum):
    """Standard fields of local dates and times.

    Examples:
        >>> ChronoField.DAY_OF_YEAR.value_range
        (1, 366)
        >>> ChronoField.HOUR_OF_DAY.is_time_based
        True
        >>> ChronoField.DAY_OF_YEAR.is_date_based
        True
    """

    NANO_OF_SECOND = "NanoOfSecond"
    NANO_OF_DAY = "NanoOfDay"
    MICRO_OF_SECOND = "MicroOfSecond"
    MILLI_OF_SECOND = "MilliOfSecond"
    SECOND_OF_MINUTE = "SecondOfMinute"
    SECOND_OF_DAY = "SecondOfDay"
    MINUTE_OF_HOUR = "MinuteOfHour"
    MINUTE_OF_DAY = "MinuteOfDay"
    HOUR_OF_AMPM = "HourOfAmPm"
    CLOCK_HOUR_OF_AMPM = "ClockHourOfAmPm"
    HOUR_OF_DAY = "HourOfDay"
    AMPM_OF_DAY = "AmPmOfDay"
    DAY_OF_WEEK = "DayOfWeek"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR = "Year"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def value_range(self) -> tuple[int, int]:
        """Return the inclusive (min, max) range of the field.

        DAY_OF_MONTH and DAY_OF_YEAR report their widest range; the
        actual maximum depends on the month and year.
        """
        return _RANGES[self]

    @property
    def is_time_based(self) -> bool:
        return self in _TIME_FIELDS

    @property
    def is_date_based(self) -> bool:
        return not self.is_time_based

    def check_valid_value(self, value: int) -> int:
        """Validate a value against the range of this field.

        Raises:
            ValidationError: If the value is out of range.
        """
        from datekoans._internal.validation import validate_field

        return validate_field(self, value)

    def __str__(self) -> str:
        return self.value


_TIME_FIELDS = frozenset(
    {
        ChronoField.NANO_OF_SECOND,
        ChronoField.NANO_OF_DAY,
        ChronoField.MICRO_OF_SECOND,
        ChronoField.MILLI_OF_SECOND,
        ChronoField.SECOND_OF_MINUTE,
        ChronoField.SECOND_OF_DAY,
        ChronoField.MINUTE_OF_HOUR,
        ChronoField.MINUTE_OF_DAY,
        ChronoField.HOUR_OF_AMPM,
        ChronoField.CLOCK_HOUR_OF_AMPM,
        ChronoField.HOUR_OF_DAY,
        ChronoField.AMPM_OF_DAY,
    }
)

_RANGES: dict[ChronoField, tuple[int, int]] = {
    ChronoField.NANO_OF_SECOND: (0, 999_999_999),
    ChronoField.NANO_OF_DAY: (0, NANOS_PER_DAY - 1),
    ChronoField.MICRO_OF_SECOND: (0, 999_999),
    ChronoField.MILLI_OF_SECOND: (0, 999),
    ChronoField.SECOND_OF_MINUTE: (0, 59),
    ChronoField.SECOND_OF_DAY: (0, SECONDS_PER_DAY - 1),
    ChronoField.MINUTE_OF_HOUR: (0, 59),
    ChronoField.MINUTE_OF_DAY: (0, 24 * 60 - 1),
    ChronoField.HOUR_OF_AMPM: (0, 11),
    ChronoField.CLOCK_HOUR_OF_AMPM: (1, 12),
    ChronoField.HOUR_OF_DAY: (0, 23),
    ChronoField.AMPM_OF_DAY: (0, 1),
    ChronoField.DAY_OF_WEEK: (1, 7),
    ChronoField.DAY_OF_MONTH: (1, 31),
    ChronoField.DAY_OF_YEAR: (1, 366),
    # -9999-01-01 to 9999-12-31
    ChronoField.EPOCH_DAY: (-4_371_587, 2_932_896),
    ChronoField.MONTH_OF_YEAR: (1, 12),
    ChronoField.PROLEPTIC_MONTH: (MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    ChronoField.YEAR: (MIN_YEAR, MAX_YEAR),
}


__all__ = ["ChronoField"]
