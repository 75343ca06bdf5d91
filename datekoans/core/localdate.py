"""LocalDate class representing a calendar date.

This module provides the LocalDate class for calendar dates in the
proleptic Gregorian calendar, with no time of day and no time zone.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from datekoans._internal.calendar import (
    day_of_year_to_md,
    days_before_month,
    days_in_month,
    days_in_year,
    epoch_day_to_iso_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from datekoans._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR
from datekoans._internal.mathutil import trunc_div
from datekoans._internal.validation import (
    check_year_in_range,
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_year,
)
from datekoans.core.duration import Duration
from datekoans.core.period import Period
from datekoans.errors import (
    ParseError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValidationError,
)
from datekoans.units.chronofield import ChronoField
from datekoans.units.chronounit import ChronoUnit
from datekoans.units.dayofweek import DayOfWeek
from datekoans.units.month import Month

if TYPE_CHECKING:
    from datekoans.core.localdatetime import LocalDateTime
    from datekoans.core.localtime import LocalTime
    from datekoans.format.formatter import DateTimeFormatter


_ISO_PATTERN = re.compile(r"([+-]?[0-9]{4,})-([0-9]{2})-([0-9]{2})")

_MONTHS_PER_UNIT: dict[ChronoUnit, int] = {
    ChronoUnit.MONTHS: 1,
    ChronoUnit.YEARS: 12,
    ChronoUnit.DECADES: 120,
    ChronoUnit.CENTURIES: 1200,
    ChronoUnit.MILLENNIA: 12000,
}


def _month_number(month: int | Month) -> int:
    if isinstance(month, Month):
        return month.value
    if isinstance(month, bool) or not isinstance(month, int):
        raise ValidationError(f"month must be an int or Month, got {month!r}")
    return month


class LocalDate:
    """A date without a time of day or time zone, such as 2016-02-02.

    LocalDate is "local" because it is not tied to any time zone: it is
    the date on a wall calendar, fit for birthdays, holidays and tax
    deadlines. It uses the proleptic Gregorian calendar with astronomical
    year numbering (year 0 = 1 BCE).

    Instances are immutable: every arithmetic method returns a new
    LocalDate, so the result must be captured.

    The internal representation is a single epoch day count
    (1970-01-01 = 0).

    Attributes:
        year: The year.
        month: The month as a Month.
        month_value: The month as a number (1-12).
        day_of_month: The day of the month (1-31).

    Examples:
        >>> groundhog_day = LocalDate.of(2016, Month.FEBRUARY, 2)
        >>> groundhog_day.get(ChronoField.DAY_OF_YEAR)
        33

        >>> start = LocalDate(2016, 3, 12)
        >>> start.plus_days(7).day_of_month
        19
        >>> start.day_of_month
        12
    """

    __slots__ = ("_days",)

    MIN: LocalDate
    MAX: LocalDate
    EPOCH: LocalDate

    def __init__(self, year: int, month: int | Month, day: int) -> None:
        """Create a LocalDate from year, month and day.

        Args:
            year: The year (-9999 to 9999).
            month: The month, as 1-12 or a Month.
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalDate(2016, 2, 29)
            LocalDate(2016, 2, 29)

            >>> LocalDate(2017, 2, 29)
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 28 for 2017-02, got 29
        """
        month = _month_number(month)
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days: int = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from an epoch day, checking only the year range."""
        year, _, _ = epoch_day_to_ymd(epoch_day)
        check_year_in_range(year)
        instance = object.__new__(cls)
        instance._days = epoch_day
        return instance

    @classmethod
    def of(cls, year: int, month: int | Month, day: int) -> LocalDate:
        """Create a LocalDate from year, month and day.

        Examples:
            >>> LocalDate.of(2016, Month.JULY, 4)
            LocalDate(2016, 7, 4)
        """
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and a 1-based day-of-year.

        Examples:
            >>> LocalDate.of_year_day(2016, 33)
            LocalDate(2016, 2, 2)
        """
        validate_year(year)
        validate_day_of_year(year, day_of_year)
        month, day = day_of_year_to_md(year, day_of_year)
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from a day count where 1970-01-01 is day 0.

        Raises:
            ValidationError: If the result is outside the supported years.
        """
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        return cls._from_epoch_day(epoch_day)

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> LocalDate:
        """Parse a date from ISO 8601 text (YYYY-MM-DD) or with a formatter.

        Raises:
            ParseError: If the text does not match.
            ValidationError: If the date components are invalid.

        Examples:
            >>> LocalDate.parse("2016-02-02")
            LocalDate(2016, 2, 2)
        """
        if formatter is not None:
            return formatter.parse_local_date(text)

        match = _ISO_PATTERN.fullmatch(text)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 date format: {text!r}. Expected YYYY-MM-DD"
            )
        year, month, day = (int(g) for g in match.groups())
        return cls(year, month, day)

    # Accessors

    @property
    def year(self) -> int:
        year, _, _ = epoch_day_to_ymd(self._days)
        return year

    @property
    def month(self) -> Month:
        """Return the month as a Month enum."""
        return Month(self.month_value)

    @property
    def month_value(self) -> int:
        """Return the month as a number (1-12)."""
        _, month, _ = epoch_day_to_ymd(self._days)
        return month

    @property
    def day_of_month(self) -> int:
        _, _, day = epoch_day_to_ymd(self._days)
        return day

    @property
    def day(self) -> int:
        """Alias for day_of_month."""
        return self.day_of_month

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> LocalDate(2016, 12, 31).day_of_year
            366
        """
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week.

        Examples:
            >>> LocalDate(2016, 2, 2).day_of_week
            <DayOfWeek.TUESDAY: 2>
        """
        return DayOfWeek(epoch_day_to_iso_day_of_week(self._days))

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    @property
    def length_of_year(self) -> int:
        return days_in_year(self.year)

    def _proleptic_month(self) -> int:
        year, month, _ = epoch_day_to_ymd(self._days)
        return year * MONTHS_PER_YEAR + month - 1

    def get(self, field: ChronoField) -> int:
        """Return the value of a date field.

        The dedicated accessors read better; get() is the generic form
        that works for any field.

        Raises:
            UnsupportedFieldError: For time fields such as HOUR_OF_DAY.

        Examples:
            >>> LocalDate(2016, 2, 2).get(ChronoField.DAY_OF_YEAR)
            33
        """
        if field is ChronoField.DAY_OF_WEEK:
            return self.day_of_week.value
        if field is ChronoField.DAY_OF_MONTH:
            return self.day_of_month
        if field is ChronoField.DAY_OF_YEAR:
            return self.day_of_year
        if field is ChronoField.EPOCH_DAY:
            return self._days
        if field is ChronoField.MONTH_OF_YEAR:
            return self.month_value
        if field is ChronoField.PROLEPTIC_MONTH:
            return self._proleptic_month()
        if field is ChronoField.YEAR:
            return self.year
        raise UnsupportedFieldError(f"unsupported field for LocalDate: {field}")

    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        """Return True for date fields and date-based units."""
        return field_or_unit.is_date_based

    def to_epoch_day(self) -> int:
        return self._days

    # Adjusters

    def with_year(self, year: int) -> LocalDate:
        """Return a copy with the year changed, clamping Feb 29 to Feb 28."""
        validate_year(year)
        _, month, day = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, min(day, days_in_month(year, month)))

    def with_month(self, month: int | Month) -> LocalDate:
        """Return a copy with the month changed, clamping the day to fit."""
        month = _month_number(month)
        validate_month(month)
        year, _, day = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, min(day, days_in_month(year, month)))

    def with_day_of_month(self, day: int) -> LocalDate:
        year, month, _ = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        return LocalDate.of_year_day(self.year, day_of_year)

    # Arithmetic

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy with a number of days added (can be negative).

        Examples:
            >>> LocalDate(2016, 3, 12).plus_days(7)
            LocalDate(2016, 3, 19)
        """
        if days == 0:
            return self
        return LocalDate._from_epoch_day(self._days + days)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(weeks * DAYS_PER_WEEK)

    def plus_months(self, months: int) -> LocalDate:
        """Return a copy with a number of months added.

        If the day does not exist in the target month, it is clamped to
        the last valid day of that month.

        Examples:
            >>> LocalDate(2016, 2, 2).plus_months(3)
            LocalDate(2016, 5, 2)
            >>> LocalDate(2016, 1, 31).plus_months(1)
            LocalDate(2016, 2, 29)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)

        total_months = year * MONTHS_PER_YEAR + (month - 1) + months
        new_year, new_month = divmod(total_months, MONTHS_PER_YEAR)
        new_month += 1
        check_year_in_range(new_year)

        new_day = min(day, days_in_month(new_year, new_month))
        return LocalDate(new_year, new_month, new_day)

    def plus_years(self, years: int) -> LocalDate:
        """Return a copy with a number of years added.

        Examples:
            >>> LocalDate(2016, 2, 29).plus_years(1)
            LocalDate(2017, 2, 28)
        """
        if years == 0:
            return self
        return self.plus_months(years * MONTHS_PER_YEAR)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def plus(self, amount: Period | int, unit: ChronoUnit | None = None) -> LocalDate:
        """Return a copy with a Period, or an amount of a unit, added.

        A Period is applied as total months first (clamping the day),
        then days.

        Raises:
            UnsupportedUnitError: For time-based units, or a Duration.

        Examples:
            >>> LocalDate(2016, 2, 2).plus(Period.of_months(3))
            LocalDate(2016, 5, 2)
            >>> LocalDate(2016, 2, 2).plus(2, ChronoUnit.WEEKS)
            LocalDate(2016, 2, 16)
        """
        if unit is None:
            if isinstance(amount, Period):
                return self.plus_months(amount.to_total_months()).plus_days(amount.days)
            if isinstance(amount, Duration):
                raise UnsupportedUnitError(
                    "a LocalDate cannot add a Duration; use a Period or plus_days()"
                )
            raise TypeError(
                f"expected Period or (amount, unit), got {type(amount).__name__}"
            )

        if unit is ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit is ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit in _MONTHS_PER_UNIT:
            return self.plus_months(amount * _MONTHS_PER_UNIT[unit])
        raise UnsupportedUnitError(f"unsupported unit for LocalDate: {unit}")

    def minus(self, amount: Period | int, unit: ChronoUnit | None = None) -> LocalDate:
        """Return a copy with a Period, or an amount of a unit, subtracted."""
        if unit is None:
            if isinstance(amount, Period):
                return self.plus(amount.negated())
            return self.plus(amount)
        return self.plus(-amount, unit)

    # Combination

    def at_time(
        self,
        time: LocalTime | int,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> LocalDateTime:
        """Combine this date with a time of day.

        Examples:
            >>> LocalDate(2016, 7, 4).at_time(2, 33)
            LocalDateTime(2016, 7, 4, 2, 33, 0, nanosecond=0)
        """
        from datekoans.core.localdatetime import LocalDateTime
        from datekoans.core.localtime import LocalTime

        if not isinstance(time, LocalTime):
            time = LocalTime(time, minute, second, nanosecond)
        return LocalDateTime.of_date_time(self, time)

    def at_start_of_day(self) -> LocalDateTime:
        """Combine this date with midnight."""
        from datekoans.core.localtime import LocalTime

        return self.at_time(LocalTime.MIDNIGHT)

    # Queries

    def until(self, end: LocalDate, unit: ChronoUnit | None = None) -> Period | int:
        """Return the amount of time until another date.

        Without a unit, returns the Period between the dates in years,
        months and days. With a date-based unit, returns the number of
        complete units, truncated toward zero.

        Raises:
            UnsupportedUnitError: For time-based units.

        Examples:
            >>> LocalDate(2016, 2, 2).until(LocalDate(2017, 2, 2))
            Period(years=1, months=0, days=0)
            >>> LocalDate(2016, 2, 2).until(LocalDate(2017, 2, 2), ChronoUnit.DAYS)
            366
        """
        if unit is None:
            return self._period_until(end)

        if unit is ChronoUnit.DAYS:
            return end._days - self._days
        if unit is ChronoUnit.WEEKS:
            return trunc_div(end._days - self._days, DAYS_PER_WEEK)
        if unit in _MONTHS_PER_UNIT:
            return trunc_div(self._months_until(end), _MONTHS_PER_UNIT[unit])
        raise UnsupportedUnitError(f"unsupported unit for LocalDate: {unit}")

    def _months_until(self, end: LocalDate) -> int:
        # Day of month packed below the month so partial months truncate
        packed_start = self._proleptic_month() * 32 + self.day_of_month
        packed_end = end._proleptic_month() * 32 + end.day_of_month
        return trunc_div(packed_end - packed_start, 32)

    def _period_until(self, end: LocalDate) -> Period:
        total_months = end._proleptic_month() - self._proleptic_month()
        days = end.day_of_month - self.day_of_month
        if total_months > 0 and days < 0:
            total_months -= 1
            days = end._days - self.plus_months(total_months)._days
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month
        years = trunc_div(total_months, MONTHS_PER_YEAR)
        months = total_months - years * MONTHS_PER_YEAR
        return Period(years, months, days)

    def is_before(self, other: LocalDate) -> bool:
        return self._days < other._days

    def is_after(self, other: LocalDate) -> bool:
        return self._days > other._days

    def is_equal(self, other: LocalDate) -> bool:
        return self._days == other._days

    # Text

    def to_iso_format(self) -> str:
        """Return the date as ISO 8601 text (YYYY-MM-DD).

        Examples:
            >>> LocalDate(2016, 2, 2).to_iso_format()
            '2016-02-02'
            >>> LocalDate(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = epoch_day_to_ymd(self._days)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"-{-year:04d}-{month:02d}-{day:02d}"

    def format(self, formatter: DateTimeFormatter) -> str:
        """Format this date with a DateTimeFormatter."""
        return formatter.format(self)

    # Operators

    def __add__(self, other: object) -> LocalDate:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> LocalDate:
        return self.__add__(other)

    def __sub__(self, other: object) -> LocalDate | Period:
        """Subtract a Period (giving a LocalDate) or a LocalDate (giving a Period).

        Examples:
            >>> LocalDate(2016, 5, 2) - Period.of_months(3)
            LocalDate(2016, 2, 2)
            >>> LocalDate(2016, 5, 2) - LocalDate(2016, 2, 2)
            Period(years=0, months=3, days=0)
        """
        if isinstance(other, Period):
            return self.minus(other)
        if isinstance(other, LocalDate):
            return other._period_until(self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days == other._days

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"LocalDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


LocalDate.MIN = LocalDate(-9999, 1, 1)
LocalDate.MAX = LocalDate(9999, 12, 31)
LocalDate.EPOCH = LocalDate(1970, 1, 1)


__all__ = ["LocalDate"]
