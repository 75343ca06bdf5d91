"""datekoans exception hierarchy.

All datekoans-specific exceptions inherit from DateKoansError.
"""

from __future__ import annotations


class DateKoansError(Exception):
    """Base exception for all datekoans errors."""

    pass


class ValidationError(DateKoansError):
    """Invalid input values.

    Raised when a temporal value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class ParseError(DateKoansError):
    """Failed to parse a string representation.

    Examples:
        - "7:30" where "07:30" is expected
        - "2016-02-30" (well formed, but see ValidationError)
        - Text that does not match a formatter pattern
    """

    pass


class PatternError(DateKoansError):
    """Malformed formatter pattern.

    Examples:
        - Unknown pattern letter such as "q"
        - Unterminated quoted literal
        - Too many letters for a field ("MMMMMM")
    """

    pass


class UnsupportedFieldError(DateKoansError):
    """A field the value does not carry.

    Raised when asking a LocalDate for HOUR_OF_DAY, or a LocalTime
    for DAY_OF_YEAR.
    """

    pass


class UnsupportedUnitError(DateKoansError):
    """A unit the operation cannot work with.

    Examples:
        - Adding HOURS to a LocalDate
        - Building a Duration from MONTHS (months have no exact length)
    """

    pass


class ArithmeticOverflowError(DateKoansError):
    """Arithmetic produced a value outside the supported range.

    Examples:
        - Adding years past year 9999
        - Subtracting days before year -9999
    """

    pass


class KoanFailure(DateKoansError, AssertionError):
    """A koan assertion did not hold."""

    pass


class KoanIncomplete(KoanFailure):
    """A koan still compares against the ``__`` placeholder."""

    pass


class KoanLookupError(DateKoansError, LookupError):
    """No suite or koan with the requested name.

    Examples:
        - `--suite AboutPeriods` when no such suite is registered
        - `--koan leap_years` when the selected suites have no such koan
    """

    pass


__all__ = [
    "DateKoansError",
    "ValidationError",
    "ParseError",
    "PatternError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "ArithmeticOverflowError",
    "KoanFailure",
    "KoanIncomplete",
    "KoanLookupError",
]
