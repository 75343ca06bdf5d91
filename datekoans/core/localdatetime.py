"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class for date-times without a
time zone, such as 2016-07-04T02:33.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from datekoans._internal.constants import NANOS_PER_DAY
from datekoans._internal.mathutil import trunc_div
from datekoans.core.duration import Duration
from datekoans.core.localdate import LocalDate
from datekoans.core.localtime import LocalTime, time_field_value
from datekoans.core.period import Period
from datekoans.errors import ParseError
from datekoans.units.chronofield import ChronoField
from datekoans.units.chronounit import ChronoUnit
from datekoans.units.dayofweek import DayOfWeek
from datekoans.units.month import Month

if TYPE_CHECKING:
    from datekoans.format.formatter import DateTimeFormatter


_ISO_PATTERN = re.compile(r"([^T]+)T(.+)", re.IGNORECASE | re.DOTALL)


class LocalDateTime:
    """A date with a time of day and no time zone, such as 2016-07-04T02:33.

    LocalDateTime pairs a LocalDate with a LocalTime. Calendar amounts
    (a Period, or MONTHS) move the date and leave the wall-clock time
    alone; exact amounts (a Duration, or HOURS) move the clock and roll
    the date over midnight when needed.

    Attributes:
        year, month, day_of_month: The date part.
        hour, minute, second, nano: The time part.

    Examples:
        >>> start = LocalDateTime(2016, 2, 2, 1, 0)
        >>> start.plus(Period.of_years(1))
        LocalDateTime(2017, 2, 2, 1, 0, 0, nanosecond=0)
        >>> start.plus(Duration.of_days(365))
        LocalDateTime(2017, 2, 1, 1, 0, 0, nanosecond=0)
    """

    __slots__ = ("_date", "_time")

    MIN: LocalDateTime
    MAX: LocalDateTime

    def __init__(
        self,
        year: int,
        month: int | Month,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalDateTime(2016, 7, 4, 2, 33)
            LocalDateTime(2016, 7, 4, 2, 33, 0, nanosecond=0)
        """
        self._date: LocalDate = LocalDate(year, month, day)
        self._time: LocalTime = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def _from_parts(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def of(
        cls,
        year: int,
        month: int | Month,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> LocalDateTime:
        """Create a LocalDateTime from component parts.

        Examples:
            >>> LocalDateTime.of(2016, Month.JULY, 4, 2, 33)
            LocalDateTime(2016, 7, 4, 2, 33, 0, nanosecond=0)
        """
        return cls(year, month, day, hour, minute, second, nanosecond)

    @classmethod
    def of_date_time(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a LocalDate and a LocalTime."""
        if not isinstance(date, LocalDate) or not isinstance(time, LocalTime):
            raise TypeError(
                "expected LocalDate and LocalTime, got "
                f"{type(date).__name__} and {type(time).__name__}"
            )
        return cls._from_parts(date, time)

    @classmethod
    def parse(
        cls, text: str, formatter: DateTimeFormatter | None = None
    ) -> LocalDateTime:
        """Parse ISO 8601 text (YYYY-MM-DDTHH:mm[:ss[.f]]) or use a formatter.

        Raises:
            ParseError: If the text does not match.
            ValidationError: If a component is out of range.

        Examples:
            >>> LocalDateTime.parse("2016-07-04T02:33")
            LocalDateTime(2016, 7, 4, 2, 33, 0, nanosecond=0)
        """
        if formatter is not None:
            return formatter.parse_local_date_time(text)

        match = _ISO_PATTERN.fullmatch(text)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 date-time format: {text!r}. "
                "Expected YYYY-MM-DDTHH:mm[:ss[.f]]"
            )
        date_text, time_text = match.groups()
        try:
            date = LocalDate.parse(date_text)
            time = LocalTime.parse(time_text)
        except ParseError as e:
            raise ParseError(f"Invalid ISO 8601 date-time format: {text!r}") from e
        return cls._from_parts(date, time)

    # Accessors

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> Month:
        return self._date.month

    @property
    def month_value(self) -> int:
        return self._date.month_value

    @property
    def day_of_month(self) -> int:
        return self._date.day_of_month

    @property
    def day(self) -> int:
        """Alias for day_of_month."""
        return self._date.day_of_month

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nano(self) -> int:
        return self._time.nano

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    def get(self, field: ChronoField) -> int:
        """Return the value of a date or time field.

        Examples:
            >>> LocalDateTime(2016, 2, 2, 14, 30).get(ChronoField.DAY_OF_YEAR)
            33
            >>> LocalDateTime(2016, 2, 2, 14, 30).get(ChronoField.HOUR_OF_AMPM)
            2
        """
        if field.is_time_based:
            return time_field_value(self._time.to_nano_of_day(), field)
        return self._date.get(field)

    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        """Return True for every field and unit."""
        return field_or_unit.is_date_based or field_or_unit.is_time_based

    # Adjusters

    def with_year(self, year: int) -> LocalDateTime:
        return self._with(self._date.with_year(year), self._time)

    def with_month(self, month: int | Month) -> LocalDateTime:
        return self._with(self._date.with_month(month), self._time)

    def with_day_of_month(self, day: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nanosecond: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nano(nanosecond))

    def truncated_to(self, unit: ChronoUnit) -> LocalDateTime:
        """Return a copy with the time truncated to unit (DAYS or smaller)."""
        return self._with(self._date, self._time.truncated_to(unit))

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date is self._date and time is self._time:
            return self
        return LocalDateTime._from_parts(date, time)

    # Arithmetic

    def plus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.plus_years(years), self._time)

    def plus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.plus_months(months), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self.plus(hours, ChronoUnit.HOURS)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus(minutes, ChronoUnit.MINUTES)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus(seconds, ChronoUnit.SECONDS)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        """Return a copy with nanoseconds added, rolling the date as needed.

        Examples:
            >>> LocalDateTime(2016, 12, 31, 23, 0).plus_nanos(3_600_000_000_000)
            LocalDateTime(2017, 1, 1, 0, 0, 0, nanosecond=0)
        """
        if nanos == 0:
            return self
        days, nano_of_day = divmod(self._time.to_nano_of_day() + nanos, NANOS_PER_DAY)
        return self._with(
            self._date.plus_days(days),
            LocalTime._from_nanos(nano_of_day),
        )

    def minus_years(self, years: int) -> LocalDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self.plus_nanos(-nanos)

    def plus(
        self,
        amount: Period | Duration | int,
        unit: ChronoUnit | None = None,
    ) -> LocalDateTime:
        """Return a copy with a Period, a Duration or an amount of a unit added.

        A Period changes the date and keeps the time of day. A Duration
        is an exact number of nanoseconds and can roll the date.

        Examples:
            >>> dt = LocalDateTime(2016, 2, 2, 1, 0)
            >>> dt.plus(Period.of_years(1)).day_of_month
            2
            >>> dt.plus(Duration.of_days(365)).day_of_month
            1
            >>> dt.plus(25, ChronoUnit.HOURS)
            LocalDateTime(2016, 2, 3, 2, 0, 0, nanosecond=0)
        """
        if unit is None:
            if isinstance(amount, Period):
                return self._with(self._date.plus(amount), self._time)
            if isinstance(amount, Duration):
                return self.plus_nanos(amount.to_nanos())
            raise TypeError(
                "expected Period, Duration or (amount, unit), "
                f"got {type(amount).__name__}"
            )

        if unit.is_time_based:
            return self.plus_nanos(amount * unit.nanos)
        return self._with(self._date.plus(amount, unit), self._time)

    def minus(
        self,
        amount: Period | Duration | int,
        unit: ChronoUnit | None = None,
    ) -> LocalDateTime:
        """Return a copy with a Period, a Duration or an amount of a unit subtracted."""
        if unit is None:
            if isinstance(amount, (Period, Duration)):
                return self.plus(amount.negated())
            return self.plus(amount)
        return self.plus(-amount, unit)

    # Queries

    def until(self, end: LocalDateTime, unit: ChronoUnit) -> int:
        """Return the number of whole units until another date-time.

        Time-based units count exact nanoseconds. Date-based units count
        calendar units, and a final day only counts once its time of day
        is reached.

        Examples:
            >>> start = LocalDateTime(2016, 2, 2, 1, 0)
            >>> start.until(LocalDateTime(2017, 2, 2, 1, 0), ChronoUnit.DAYS)
            366
            >>> start.until(LocalDateTime(2017, 2, 2, 0, 59), ChronoUnit.YEARS)
            0
        """
        if unit.is_time_based:
            diff = (
                (end._date.to_epoch_day() - self._date.to_epoch_day()) * NANOS_PER_DAY
                + end._time.to_nano_of_day()
                - self._time.to_nano_of_day()
            )
            return trunc_div(diff, unit.nanos)

        end_date = end._date
        if end_date.is_after(self._date) and end._time.is_before(self._time):
            end_date = end_date.minus_days(1)
        elif end_date.is_before(self._date) and end._time.is_after(self._time):
            end_date = end_date.plus_days(1)
        return self._date.until(end_date, unit)

    def is_before(self, other: LocalDateTime) -> bool:
        return self._key() < other._key()

    def is_after(self, other: LocalDateTime) -> bool:
        return self._key() > other._key()

    def is_equal(self, other: LocalDateTime) -> bool:
        return self._key() == other._key()

    def _key(self) -> tuple[int, int]:
        return (self._date.to_epoch_day(), self._time.to_nano_of_day())

    # Text

    def to_iso_format(self) -> str:
        """Return ISO 8601 text, with the time printed as LocalTime prints it.

        Examples:
            >>> LocalDateTime(2016, 7, 4, 2, 33).to_iso_format()
            '2016-07-04T02:33'
        """
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def format(self, formatter: DateTimeFormatter) -> str:
        """Format this date-time with a DateTimeFormatter.

        Examples:
            >>> from datekoans.format import DateTimeFormatter
            >>> fmt = DateTimeFormatter.of_pattern("MM/dd/yyyy HH:mm")
            >>> LocalDateTime(2016, 7, 4, 2, 33).format(fmt)
            '07/04/2016 02:33'
        """
        return formatter.format(self)

    # Operators

    def __add__(self, other: object) -> LocalDateTime:
        if not isinstance(other, (Period, Duration)):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> LocalDateTime:
        return self.__add__(other)

    def __sub__(self, other: object) -> LocalDateTime | Duration:
        """Subtract a Period or Duration, or another LocalDateTime.

        Subtracting a LocalDateTime gives the exact Duration between them.
        """
        if isinstance(other, (Period, Duration)):
            return self.minus(other)
        if isinstance(other, LocalDateTime):
            return Duration.between(other, self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"LocalDateTime({self.year}, {self.month_value}, {self.day_of_month}, "
            f"{self.hour}, {self.minute}, {self.second}, nanosecond={self.nano})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        return True


LocalDateTime.MIN = LocalDateTime._from_parts(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime._from_parts(LocalDate.MAX, LocalTime.MAX)


__all__ = ["LocalDateTime"]
