"""Calendar utilities for datekoans.

Internal functions for proleptic Gregorian calendar calculations:
leap years, month lengths and conversion between (year, month, day)
and epoch days.

Epoch day 0 = 1970-01-01. Years use astronomical numbering, so year 0
exists and equals 1 BCE.

This module is not part of the public API.
"""

from __future__ import annotations

from datekoans._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
    EPOCH_ORDINAL,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2016)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2000)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an epoch day (1970-01-01 = 0).

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2016, 2, 2)
        16833
    """
    # Python's // floors toward negative infinity, which keeps the
    # leap-day count right for years before 1.
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    ordinal = days_before_year + days_before_month(year, month) + day
    return ordinal - EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(17199)
        (2017, 2, 2)
    """
    # n is 0-indexed days since 0001-01-01
    n = epoch_day + EPOCH_ORDINAL - 1

    # Whole 400-year cycles, floored so the remainder is never negative
    n400, n = divmod(n, DAYS_PER_CYCLE)

    # 100-year cycles within the 400: 36524 days (the last one has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: 365 days (the leap one has 366)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = day_of_year_to_md(year, n + 1)
    return (year, month, day)


def day_of_year_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to (month, day).

    Raises:
        ValueError: If doy is outside the year.
    """
    if doy < 1 or doy > days_in_year(year):
        raise ValueError(f"Invalid day of year: {doy} for year {year}")

    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def epoch_day_to_iso_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (Monday=1, Sunday=7).

    1970-01-01 was a Thursday.
    """
    return (epoch_day + 3) % 7 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "day_of_year_to_md",
    "epoch_day_to_iso_day_of_week",
]
