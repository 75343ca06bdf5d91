"""LocalTime class representing a time of day.

This module provides the LocalTime class for time-of-day values with
nanosecond precision and no date or time zone.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from datekoans._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from datekoans._internal.mathutil import trunc_div
from datekoans._internal.validation import validate_field
from datekoans.core.duration import Duration
from datekoans.errors import ParseError, UnsupportedFieldError, UnsupportedUnitError
from datekoans.units.chronofield import ChronoField
from datekoans.units.chronounit import ChronoUnit

if TYPE_CHECKING:
    from datekoans.core.localdate import LocalDate
    from datekoans.core.localdatetime import LocalDateTime
    from datekoans.format.formatter import DateTimeFormatter


_ISO_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})(?::([0-9]{2})(?:\.([0-9]{1,9}))?)?")


def time_field_value(nano_of_day: int, field: ChronoField) -> int:
    """Return the value of a time field for a nanosecond-of-day.

    Shared by LocalTime and LocalDateTime.

    Raises:
        UnsupportedFieldError: If field is not time-based.
    """
    hour = nano_of_day // NANOS_PER_HOUR
    if field is ChronoField.NANO_OF_SECOND:
        return nano_of_day % NANOS_PER_SECOND
    if field is ChronoField.NANO_OF_DAY:
        return nano_of_day
    if field is ChronoField.MICRO_OF_SECOND:
        return nano_of_day % NANOS_PER_SECOND // NANOS_PER_MICROSECOND
    if field is ChronoField.MILLI_OF_SECOND:
        return nano_of_day % NANOS_PER_SECOND // NANOS_PER_MILLISECOND
    if field is ChronoField.SECOND_OF_MINUTE:
        return nano_of_day % NANOS_PER_MINUTE // NANOS_PER_SECOND
    if field is ChronoField.SECOND_OF_DAY:
        return nano_of_day // NANOS_PER_SECOND
    if field is ChronoField.MINUTE_OF_HOUR:
        return nano_of_day % NANOS_PER_HOUR // NANOS_PER_MINUTE
    if field is ChronoField.MINUTE_OF_DAY:
        return nano_of_day // NANOS_PER_MINUTE
    if field is ChronoField.HOUR_OF_AMPM:
        return hour % 12
    if field is ChronoField.CLOCK_HOUR_OF_AMPM:
        return hour % 12 or 12
    if field is ChronoField.HOUR_OF_DAY:
        return hour
    if field is ChronoField.AMPM_OF_DAY:
        return hour // 12
    raise UnsupportedFieldError(f"unsupported field for a time of day: {field}")


def _parse_fraction(frac: str) -> int:
    """Convert 1-9 fractional digits to nanoseconds ("5" -> 500000000)."""
    return int(frac.ljust(9, "0")[:9])


class LocalTime:
    """A time of day without a date or time zone, such as 10:15:30.

    LocalTime is the time on a wall clock: a repeating 11:00 appointment
    or a shop's opening hour. It ranges from midnight (00:00) to one
    nanosecond before the next midnight, and arithmetic wraps around
    midnight.

    Unlike a calendar object with a single ``get(constant)`` method,
    LocalTime has one accessor per component; ``get(field)`` is still
    there for generic code.

    The internal representation is the nanosecond of the day in a single
    `_nanos` slot.

    Attributes:
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nano: The nanosecond within the second (0-999999999).

    Examples:
        >>> t = LocalTime.of(2, 30, 45)
        >>> (t.hour, t.minute, t.second)
        (2, 30, 45)

        >>> LocalTime.parse("10:30").minus(2, ChronoUnit.HOURS)
        LocalTime(8, 30, 0, nanosecond=0)

        >>> str(LocalTime.of(7, 30))
        '07:30'
    """

    __slots__ = ("_nanos",)

    MIDNIGHT: LocalTime
    NOON: LocalTime
    MIN: LocalTime
    MAX: LocalTime

    def __init__(
        self,
        hour: int,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalTime from component parts.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalTime(7, 30)
            LocalTime(7, 30, 0, nanosecond=0)

            >>> LocalTime(24, 0)
            Traceback (most recent call last):
            ...
            ValidationError: HourOfDay must be between 0 and 23, got 24
        """
        validate_field(ChronoField.HOUR_OF_DAY, hour)
        validate_field(ChronoField.MINUTE_OF_HOUR, minute)
        validate_field(ChronoField.SECOND_OF_MINUTE, second)
        validate_field(ChronoField.NANO_OF_SECOND, nanosecond)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from a nanosecond-of-day known to be valid."""
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of(
        cls,
        hour: int,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> LocalTime:
        """Create a LocalTime from hour, minute, second and nanosecond."""
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> LocalTime:
        """Create a LocalTime from the second of the day (0-86399).

        Examples:
            >>> LocalTime.of_second_of_day(3600)
            LocalTime(1, 0, 0, nanosecond=0)
        """
        validate_field(ChronoField.SECOND_OF_DAY, second_of_day)
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from the nanosecond of the day."""
        validate_field(ChronoField.NANO_OF_DAY, nano_of_day)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter | None = None) -> LocalTime:
        """Parse a time from ISO 8601 text or with a formatter.

        Without a formatter the accepted forms are HH:mm, HH:mm:ss and
        HH:mm:ss.f with one to nine fraction digits. Hours and minutes
        must have two digits.

        Raises:
            ParseError: If the text does not match.
            ValidationError: If a component is out of range.

        Examples:
            >>> LocalTime.parse("07:30") == LocalTime.of(7, 30)
            True
            >>> LocalTime.parse("14:30:45.5")
            LocalTime(14, 30, 45, nanosecond=500000000)
        """
        if formatter is not None:
            return formatter.parse_local_time(text)

        match = _ISO_PATTERN.fullmatch(text)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 time format: {text!r}. Expected HH:mm[:ss[.f]]"
            )
        hour, minute, second, frac = match.groups()
        return cls(
            int(hour),
            int(minute),
            int(second) if second else 0,
            _parse_fraction(frac) if frac else 0,
        )

    # Accessors

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nano(self) -> int:
        """Return the nanosecond within the second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    def get(self, field: ChronoField) -> int:
        """Return the value of a time field.

        Raises:
            UnsupportedFieldError: For date fields such as DAY_OF_YEAR.

        Examples:
            >>> LocalTime(14, 30).get(ChronoField.CLOCK_HOUR_OF_AMPM)
            2
        """
        return time_field_value(self._nanos, field)

    def is_supported(self, field_or_unit: ChronoField | ChronoUnit) -> bool:
        """Return True for time fields and time-based units."""
        return field_or_unit.is_time_based

    def to_second_of_day(self) -> int:
        return self._nanos // NANOS_PER_SECOND

    def to_nano_of_day(self) -> int:
        return self._nanos

    # Adjusters

    def with_hour(self, hour: int) -> LocalTime:
        return LocalTime(hour, self.minute, self.second, self.nano)

    def with_minute(self, minute: int) -> LocalTime:
        return LocalTime(self.hour, minute, self.second, self.nano)

    def with_second(self, second: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, second, self.nano)

    def with_nano(self, nanosecond: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, self.second, nanosecond)

    def truncated_to(self, unit: ChronoUnit) -> LocalTime:
        """Return a copy with everything smaller than unit set to zero.

        Raises:
            UnsupportedUnitError: For units longer than DAYS.

        Examples:
            >>> LocalTime(10, 45, 30).truncated_to(ChronoUnit.HOURS)
            LocalTime(10, 0, 0, nanosecond=0)
        """
        if unit is ChronoUnit.DAYS:
            return LocalTime.MIDNIGHT
        if not unit.is_time_based:
            raise UnsupportedUnitError(f"unit is too large to truncate to: {unit}")
        return LocalTime._from_nanos(self._nanos - self._nanos % unit.nanos)

    # Arithmetic

    def plus_hours(self, hours: int) -> LocalTime:
        """Return a copy with hours added, wrapping around midnight.

        Examples:
            >>> LocalTime(23, 0).plus_hours(2)
            LocalTime(1, 0, 0, nanosecond=0)
        """
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalTime:
        if nanos == 0:
            return self
        return LocalTime._from_nanos((self._nanos + nanos) % NANOS_PER_DAY)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-nanos)

    def plus(self, amount: Duration | int, unit: ChronoUnit | None = None) -> LocalTime:
        """Return a copy with a Duration, or an amount of a unit, added.

        Raises:
            UnsupportedUnitError: For date-based units such as DAYS.

        Examples:
            >>> LocalTime(10, 30).plus(90, ChronoUnit.MINUTES)
            LocalTime(12, 0, 0, nanosecond=0)
        """
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(
                    f"expected Duration or (amount, unit), got {type(amount).__name__}"
                )
            return self.plus_nanos(amount.to_nanos())
        if not unit.is_time_based:
            raise UnsupportedUnitError(f"unsupported unit for LocalTime: {unit}")
        return self.plus_nanos(amount * unit.nanos)

    def minus(self, amount: Duration | int, unit: ChronoUnit | None = None) -> LocalTime:
        """Return a copy with a Duration, or an amount of a unit, subtracted.

        Examples:
            >>> LocalTime(10, 30).minus(2, ChronoUnit.HOURS)
            LocalTime(8, 30, 0, nanosecond=0)
        """
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(
                    f"expected Duration or (amount, unit), got {type(amount).__name__}"
                )
            return self.plus_nanos(-amount.to_nanos())
        return self.plus(-amount, unit)

    # Combination

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine this time with a date."""
        from datekoans.core.localdatetime import LocalDateTime

        return LocalDateTime.of_date_time(date, self)

    # Queries

    def until(self, end: LocalTime, unit: ChronoUnit) -> int:
        """Return the number of whole units until another time.

        The result is negative when end is earlier, and truncated toward
        zero.

        Raises:
            UnsupportedUnitError: For date-based units.

        Examples:
            >>> LocalTime(8, 30).until(LocalTime(10, 29), ChronoUnit.HOURS)
            1
        """
        if not unit.is_time_based:
            raise UnsupportedUnitError(f"unsupported unit for LocalTime: {unit}")
        diff = end._nanos - self._nanos
        return trunc_div(diff, unit.nanos)

    def is_before(self, other: LocalTime) -> bool:
        return self._nanos < other._nanos

    def is_after(self, other: LocalTime) -> bool:
        return self._nanos > other._nanos

    # Text

    def to_iso_format(self) -> str:
        """Return ISO 8601 text, leaving out zero seconds and fractions.

        The fraction is printed with 3, 6 or 9 digits, whichever is
        shortest without losing precision.

        Examples:
            >>> LocalTime(7, 30).to_iso_format()
            '07:30'
            >>> LocalTime(7, 30, 15).to_iso_format()
            '07:30:15'
            >>> LocalTime(7, 30, 0, 500_000_000).to_iso_format()
            '07:30:00.500'
        """
        text = f"{self.hour:02d}:{self.minute:02d}"
        second, nano = self.second, self.nano
        if second == 0 and nano == 0:
            return text
        text += f":{second:02d}"
        if nano == 0:
            return text
        if nano % NANOS_PER_MILLISECOND == 0:
            return text + f".{nano // NANOS_PER_MILLISECOND:03d}"
        if nano % NANOS_PER_MICROSECOND == 0:
            return text + f".{nano // NANOS_PER_MICROSECOND:06d}"
        return text + f".{nano:09d}"

    def format(self, formatter: DateTimeFormatter) -> str:
        """Format this time with a DateTimeFormatter."""
        return formatter.format(self)

    # Operators

    def __add__(self, other: object) -> LocalTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> LocalTime:
        return self.__add__(other)

    def __sub__(self, other: object) -> LocalTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return (
            f"LocalTime({self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self.nano})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, midnight included."""
        return True


LocalTime.MIDNIGHT = LocalTime(0, 0)
LocalTime.NOON = LocalTime(12, 0)
LocalTime.MIN = LocalTime.MIDNIGHT
LocalTime.MAX = LocalTime(23, 59, 59, 999_999_999)


__all__ = ["LocalTime"]
