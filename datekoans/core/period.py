"""Period class representing calendar-based amounts of time.

This module provides the Period class for spans such as "3 months" or
"1 year" whose exact length depends on the date they are applied to,
as opposed to exact time spans (Duration).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, TypeVar

from datekoans._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR
from datekoans._internal.mathutil import trunc_div
from datekoans.errors import ParseError, UnsupportedUnitError
from datekoans.units.chronounit import ChronoUnit

if TYPE_CHECKING:
    from datekoans.core.localdate import LocalDate
    from datekoans.core.localdatetime import LocalDateTime

    _T = TypeVar("_T", LocalDate, LocalDateTime)


_ISO_PATTERN = re.compile(
    r"([-+]?)P"
    r"(?:([-+]?[0-9]+)Y)?"
    r"(?:([-+]?[0-9]+)M)?"
    r"(?:([-+]?[0-9]+)W)?"
    r"(?:([-+]?[0-9]+)D)?",
    re.IGNORECASE,
)


class Period:
    """A calendar-based amount of time in years, months and days.

    Unlike Duration, Period represents calendar concepts like "1 month"
    that vary by context. Adding one month to January 31 gives the last
    day of February; adding one year to 2016-02-02 gives 2017-02-02 even
    though 366 days passed in between.

    The components are stored as given. Period(months=14) stays 14
    months; use normalized() to fold it into 1 year and 2 months.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> quarter = Period.of_months(3)
        >>> quarter
        Period(years=0, months=3, days=0)

        >>> from datekoans.core.localdate import LocalDate
        >>> LocalDate(2016, 2, 2).plus(quarter)
        LocalDate(2016, 5, 2)

        >>> str(Period(years=1, months=2, days=3))
        'P1Y2M3D'
    """

    __slots__ = ("_years", "_months", "_days")

    ZERO: Period

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> Period(years=1, months=6)
            Period(years=1, months=6, days=0)
        """
        self._years = years
        self._months = months
        self._days = days

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        """Create a Period from years, months and days."""
        return cls(years, months, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years.

        Examples:
            >>> Period.of_years(1)
            Period(years=1, months=0, days=0)
        """
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of whole weeks, stored as days.

        Examples:
            >>> Period.of_weeks(2)
            Period(years=0, months=0, days=14)
        """
        return cls(days=weeks * DAYS_PER_WEEK)

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @classmethod
    def between(cls, start: LocalDate, end: LocalDate) -> Period:
        """Return the Period from start (inclusive) to end (exclusive).

        The result is in whole months first, then the remaining days,
        and carries a single sign.

        Examples:
            >>> from datekoans.core.localdate import LocalDate
            >>> Period.between(LocalDate(2016, 2, 2), LocalDate(2017, 3, 5))
            Period(years=1, months=1, days=3)
        """
        return start.until(end)

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO 8601 period such as "P1Y2M3D" or "P2W".

        Weeks are converted to days. Each number may carry its own sign,
        and a leading minus negates the whole period.

        Raises:
            ParseError: If the text is not an ISO 8601 period.

        Examples:
            >>> Period.parse("P1Y2M3W4D")
            Period(years=1, months=2, days=25)
            >>> Period.parse("-P1M")
            Period(years=0, months=-1, days=0)
        """
        match = _ISO_PATTERN.fullmatch(text.strip())
        if not match:
            raise ParseError(f"invalid ISO 8601 period: {text!r}")

        negate, years, months, weeks, days = match.groups()
        if years is None and months is None and weeks is None and days is None:
            raise ParseError(f"invalid ISO 8601 period: {text!r}")

        period = cls(
            years=int(years or 0),
            months=int(months or 0),
            days=int(days or 0) + int(weeks or 0) * DAYS_PER_WEEK,
        )
        if negate == "-":
            return period.negated()
        return period

    # Accessors

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    @property
    def is_negative(self) -> bool:
        """Return True if any component is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def get(self, unit: ChronoUnit) -> int:
        """Return the YEARS, MONTHS or DAYS component.

        Raises:
            UnsupportedUnitError: For any other unit.
        """
        if unit is ChronoUnit.YEARS:
            return self._years
        if unit is ChronoUnit.MONTHS:
            return self._months
        if unit is ChronoUnit.DAYS:
            return self._days
        raise UnsupportedUnitError(f"unsupported unit for Period.get: {unit}")

    def to_total_months(self) -> int:
        """Return years * 12 + months; days are not included.

        Examples:
            >>> Period(years=1, months=2).to_total_months()
            14
        """
        return self._years * MONTHS_PER_YEAR + self._months

    # Copies with one component changed

    def with_years(self, years: int) -> Period:
        return Period(years, self._months, self._days)

    def with_months(self, months: int) -> Period:
        return Period(self._years, months, self._days)

    def with_days(self, days: int) -> Period:
        return Period(self._years, self._months, days)

    # Arithmetic

    def plus(self, other: Period) -> Period:
        """Return the component-wise sum of two periods.

        Examples:
            >>> Period.of_years(1).plus(Period.of_months(6))
            Period(years=1, months=6, days=0)
        """
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period) -> Period:
        """Return the component-wise difference of two periods."""
        return Period(
            self._years - other._years,
            self._months - other._months,
            self._days - other._days,
        )

    def plus_years(self, years: int) -> Period:
        return self.with_years(self._years + years)

    def plus_months(self, months: int) -> Period:
        return self.with_months(self._months + months)

    def plus_days(self, days: int) -> Period:
        return self.with_days(self._days + days)

    def minus_years(self, years: int) -> Period:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        return self.plus_days(-days)

    def multiplied_by(self, scalar: int) -> Period:
        """Return a period with every component multiplied by scalar."""
        return Period(self._years * scalar, self._months * scalar, self._days * scalar)

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalized(self) -> Period:
        """Return a copy with months folded into years; days are unchanged.

        Years and months end up with the same sign.

        Examples:
            >>> Period(months=14).normalized()
            Period(years=1, months=2, days=0)
            >>> Period(years=1, months=-14).normalized()
            Period(years=0, months=-2, days=0)
        """
        total = self.to_total_months()
        years = trunc_div(total, MONTHS_PER_YEAR)
        months = total - years * MONTHS_PER_YEAR
        return Period(years, months, self._days)

    def add_to(self, temporal: _T) -> _T:
        """Return the date (or date-time) moved forward by this period.

        Years and months are applied together, clamping the day to the
        end of the target month, then days are added.
        """
        return temporal.plus(self)

    def subtract_from(self, temporal: _T) -> _T:
        """Return the date (or date-time) moved back by this period."""
        return temporal.minus(self)

    # Operators

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __pos__(self) -> Period:
        return self

    def __mul__(self, other: object) -> Period:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        """Support scalar * Period."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Check equality component by component.

        Period(months=12) != Period(years=1); compare normalized()
        copies for a looser match.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"

    def __str__(self) -> str:
        """Return the ISO 8601 form, "P0D" for a zero period."""
        if self.is_zero:
            return "P0D"

        parts = ["P"]
        if self._years != 0:
            parts.append(f"{self._years}Y")
        if self._months != 0:
            parts.append(f"{self._months}M")
        if self._days != 0:
            parts.append(f"{self._days}D")
        return "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


Period.ZERO = Period()


__all__ = ["Period"]
