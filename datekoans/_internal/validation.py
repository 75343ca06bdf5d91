"""Validation utilities for datekoans.

Range checks shared by the value types. Each check raises
ValidationError with a message naming the offending component.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datekoans._internal.calendar import days_in_month, days_in_year
from datekoans._internal.constants import MAX_YEAR, MIN_YEAR
from datekoans.errors import ArithmeticOverflowError, ValidationError

if TYPE_CHECKING:
    from datekoans.units.chronofield import ChronoField


def validate_range(name: str, value: int, min_val: int, max_val: int) -> int:
    """Validate that a named value lies in [min_val, max_val].

    Returns:
        The value, for use in expressions.

    Raises:
        ValidationError: If the value is outside the range.

    Examples:
        >>> validate_range("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {type(value).__name__}")
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )
    return value


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_day_of_year(year: int, day_of_year: int) -> None:
    """Validate a 1-based day-of-year against the length of the year."""
    max_day = days_in_year(year)
    if day_of_year < 1 or day_of_year > max_day:
        raise ValidationError(
            f"day of year must be between 1 and {max_day} for {year}, "
            f"got {day_of_year}"
        )


def validate_field(field: ChronoField, value: int) -> int:
    """Validate a value against the fixed range of a ChronoField."""
    min_val, max_val = field.value_range
    return validate_range(field.display_name, value, min_val, max_val)


def check_year_in_range(year: int) -> None:
    """Raise ArithmeticOverflowError if arithmetic left the year range."""
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ArithmeticOverflowError(
            f"result year {year} is outside {MIN_YEAR} to {MAX_YEAR}"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_day_of_year",
    "validate_field",
    "check_year_in_range",
]
