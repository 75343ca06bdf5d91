"""Duration class representing an exact span of time.

This module provides the Duration class for time spans measured in
seconds and nanoseconds, independent of any calendar.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, TypeVar

from datekoans._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datekoans._internal.mathutil import trunc_div
from datekoans.errors import ParseError, UnsupportedUnitError
from datekoans.units.chronounit import ChronoUnit

if TYPE_CHECKING:
    from datekoans.core.localdatetime import LocalDateTime
    from datekoans.core.localtime import LocalTime

    _T = TypeVar("_T", LocalTime, LocalDateTime)


_ISO_PATTERN = re.compile(
    r"([-+]?)P"
    r"(?:([-+]?[0-9]+)D)?"
    r"(T"
    r"(?:([-+]?[0-9]+)H)?"
    r"(?:([-+]?[0-9]+)M)?"
    r"(?:([-+]?)([0-9]+)(?:[.,]([0-9]{0,9}))?S)?"
    r")?",
    re.IGNORECASE,
)


class Duration:
    """An exact amount of time, such as "34.5 seconds" or "366 days".

    A Duration is a count of seconds plus a nanosecond adjustment. It
    knows nothing about calendars: one day is always exactly 24 hours,
    which is why ``Duration.of_days(365)`` and ``Period.of_years(1)``
    land on different dates when a leap day is in between.

    The internal representation is normalized such that:
    - `_seconds` carries the sign and can be any integer
    - `_nanos` is always in the range [0, 1_000_000_000)

    Attributes:
        seconds: Whole seconds, floored (can be negative).
        nano: Nanosecond adjustment within the second [0, 1e9).

    Examples:
        >>> Duration.of_days(1)
        Duration(seconds=86400, nanos=0)

        >>> Duration.of_millis(-1500)
        Duration(seconds=-2, nanos=500000000)

        >>> str(Duration.of_days(366))
        'PT8784H'
    """

    __slots__ = ("_seconds", "_nanos")

    ZERO: Duration

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Duration from seconds and a nanosecond adjustment.

        Both parameters can be any integer; the result is normalized.

        Examples:
            >>> Duration(seconds=3, nanos=-1)
            Duration(seconds=2, nanos=999999999)
        """
        extra_seconds, nano = divmod(nanos, NANOS_PER_SECOND)
        self._seconds: int = seconds + extra_seconds
        self._nanos: int = nano

    # Factories

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of standard 24-hour days.

        Examples:
            >>> Duration.of_days(365).to_hours()
            8760
        """
        return cls(seconds=days * SECONDS_PER_DAY)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        """Create a Duration of a number of hours."""
        return cls(seconds=hours * SECONDS_PER_HOUR)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        """Create a Duration of a number of minutes."""
        return cls(seconds=minutes * SECONDS_PER_MINUTE)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration of seconds with an optional nanosecond adjustment.

        Examples:
            >>> Duration.of_seconds(3, -100)
            Duration(seconds=2, nanos=999999900)
        """
        return cls(seconds=seconds, nanos=nano_adjustment)

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        """Create a Duration of a number of milliseconds."""
        return cls(nanos=millis * NANOS_PER_MILLISECOND)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration of a number of nanoseconds."""
        return cls(nanos=nanos)

    @classmethod
    def of(cls, amount: int, unit: ChronoUnit) -> Duration:
        """Create a Duration from an amount of an exact unit.

        DAYS counts as exactly 24 hours. WEEKS and longer have no exact
        length and are rejected.

        Raises:
            UnsupportedUnitError: If the unit is WEEKS or longer.

        Examples:
            >>> Duration.of(2, ChronoUnit.HOURS)
            Duration(seconds=7200, nanos=0)
        """
        return cls.ZERO.plus(amount, unit)

    @classmethod
    def between(cls, start: _T, end: _T) -> Duration:
        """Return the exact Duration from start to end.

        Both arguments must be LocalTime or both LocalDateTime. The
        result is negative when end is before start.

        Raises:
            UnsupportedUnitError: If the values cannot measure nanoseconds
                (for example LocalDate).

        Examples:
            >>> from datekoans.core.localdatetime import LocalDateTime
            >>> start = LocalDateTime(2016, 2, 2, 1, 0)
            >>> Duration.between(start, start.plus_years(1)).to_days()
            366
        """
        return cls.of_nanos(start.until(end, ChronoUnit.NANOS))

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse an ISO 8601 duration such as "PT8H6M12.345S" or "P2DT3H".

        Days are exact 24-hour days. Each number may carry its own sign,
        and a leading minus negates the whole duration.

        Raises:
            ParseError: If the text is not an ISO 8601 duration.

        Examples:
            >>> Duration.parse("PT-2H")
            Duration(seconds=-7200, nanos=0)
            >>> Duration.parse("P1DT0.5S")
            Duration(seconds=86400, nanos=500000000)
        """
        match = _ISO_PATTERN.fullmatch(text.strip())
        if not match:
            raise ParseError(f"invalid ISO 8601 duration: {text!r}")

        negate, days, t_part, hours, minutes, sec_sign, secs, frac = match.groups()
        if days is None and t_part is None:
            raise ParseError(f"invalid ISO 8601 duration: {text!r}")
        if t_part is not None and t_part.upper() == "T":
            raise ParseError(f"ISO 8601 duration has an empty time part: {text!r}")

        total = 0
        if days:
            total += int(days) * SECONDS_PER_DAY * NANOS_PER_SECOND
        if hours:
            total += int(hours) * NANOS_PER_HOUR
        if minutes:
            total += int(minutes) * NANOS_PER_MINUTE
        if secs:
            sec_nanos = int(secs) * NANOS_PER_SECOND
            if frac:
                sec_nanos += int(frac.ljust(9, "0"))
            total += -sec_nanos if sec_sign == "-" else sec_nanos
        if negate == "-":
            total = -total
        return cls.of_nanos(total)

    # Accessors

    @property
    def seconds(self) -> int:
        """Return the whole seconds, floored toward negative infinity."""
        return self._seconds

    @property
    def nano(self) -> int:
        """Return the nanosecond adjustment within the second [0, 1e9)."""
        return self._nanos

    @property
    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    def get(self, unit: ChronoUnit) -> int:
        """Return the SECONDS or NANOS component.

        Raises:
            UnsupportedUnitError: For any other unit.
        """
        if unit is ChronoUnit.SECONDS:
            return self._seconds
        if unit is ChronoUnit.NANOS:
            return self._nanos
        raise UnsupportedUnitError(f"unsupported unit for Duration.get: {unit}")

    # Conversions

    def to_days(self) -> int:
        """Return the number of whole days, truncated toward zero."""
        return trunc_div(self.to_nanos(), SECONDS_PER_DAY * NANOS_PER_SECOND)

    def to_hours(self) -> int:
        """Return the number of whole hours, truncated toward zero."""
        return trunc_div(self.to_nanos(), NANOS_PER_HOUR)

    def to_minutes(self) -> int:
        """Return the number of whole minutes, truncated toward zero."""
        return trunc_div(self.to_nanos(), NANOS_PER_MINUTE)

    def to_seconds(self) -> int:
        """Return the number of whole seconds, truncated toward zero."""
        return trunc_div(self.to_nanos(), NANOS_PER_SECOND)

    def to_millis(self) -> int:
        """Return the number of whole milliseconds, truncated toward zero."""
        return trunc_div(self.to_nanos(), NANOS_PER_MILLISECOND)

    def to_nanos(self) -> int:
        """Return the exact length in nanoseconds."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def to_hours_part(self) -> int:
        """Return the hours within the day, as in the "H" of "dd HH:mm:ss"."""
        return self.to_hours() - self.to_days() * 24

    def to_minutes_part(self) -> int:
        """Return the minutes within the hour."""
        return self.to_minutes() - self.to_hours() * 60

    def to_seconds_part(self) -> int:
        """Return the seconds within the minute."""
        return self.to_seconds() - self.to_minutes() * 60

    # Arithmetic

    def plus(self, amount: Duration | int, unit: ChronoUnit | None = None) -> Duration:
        """Return this duration plus another duration or an amount of a unit.

        Raises:
            UnsupportedUnitError: If unit has no exact length (WEEKS and longer).

        Examples:
            >>> Duration.of_hours(1).plus(Duration.of_minutes(30))
            Duration(seconds=5400, nanos=0)
            >>> Duration.ZERO.plus(3, ChronoUnit.DAYS).to_hours()
            72
        """
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(
                    f"expected Duration or (amount, unit), got {type(amount).__name__}"
                )
            return Duration(self._seconds + amount._seconds, self._nanos + amount._nanos)
        if unit.is_date_based and unit is not ChronoUnit.DAYS:
            raise UnsupportedUnitError(
                f"unit must not have an estimated duration: {unit}"
            )
        return Duration(self._seconds, self._nanos + amount * unit.nanos)

    def minus(self, amount: Duration | int, unit: ChronoUnit | None = None) -> Duration:
        """Return this duration minus another duration or an amount of a unit."""
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(
                    f"expected Duration or (amount, unit), got {type(amount).__name__}"
                )
            return self.plus(amount.negated())
        return self.plus(-amount, unit)

    def plus_days(self, days: int) -> Duration:
        return self.plus(days, ChronoUnit.DAYS)

    def plus_hours(self, hours: int) -> Duration:
        return self.plus(hours, ChronoUnit.HOURS)

    def plus_minutes(self, minutes: int) -> Duration:
        return self.plus(minutes, ChronoUnit.MINUTES)

    def plus_seconds(self, seconds: int) -> Duration:
        return self.plus(seconds, ChronoUnit.SECONDS)

    def plus_millis(self, millis: int) -> Duration:
        return self.plus(millis, ChronoUnit.MILLIS)

    def plus_nanos(self, nanos: int) -> Duration:
        return self.plus(nanos, ChronoUnit.NANOS)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def multiplied_by(self, multiplicand: int) -> Duration:
        """Return this duration scaled by an integer.

        Examples:
            >>> Duration.of_minutes(20).multiplied_by(3)
            Duration(seconds=3600, nanos=0)
        """
        return Duration.of_nanos(self.to_nanos() * multiplicand)

    def divided_by(self, divisor: int) -> Duration:
        """Return this duration divided by an integer, truncated toward zero.

        Raises:
            ZeroDivisionError: If divisor is zero.
        """
        if divisor == 0:
            raise ZeroDivisionError("cannot divide a Duration by zero")
        return Duration.of_nanos(trunc_div(self.to_nanos(), divisor))

    def negated(self) -> Duration:
        return Duration.of_nanos(-self.to_nanos())

    def abs(self) -> Duration:
        return self.negated() if self.is_negative else self

    def add_to(self, temporal: _T) -> _T:
        """Return the temporal value moved forward by this duration."""
        return temporal.plus(self)

    def subtract_from(self, temporal: _T) -> _T:
        """Return the temporal value moved back by this duration."""
        return temporal.minus(self)

    # Operators

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Duration:
        """Floor-divide by an integer, rounding toward negative infinity.

        Examples:
            >>> Duration.of_seconds(100) // 3
            Duration(seconds=33, nanos=333333333)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return Duration.of_nanos(self.to_nanos() // other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_nanos() < other.to_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_nanos() <= other.to_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_nanos() > other.to_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_nanos() >= other.to_nanos()

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the ISO 8601 form with hours as the largest unit.

        Examples:
            >>> str(Duration.ZERO)
            'PT0S'
            >>> str(Duration.of_seconds(-90, 500_000_000))
            'PT-1M-29.5S'
        """
        total = self.to_nanos()
        sign = "-" if total < 0 else ""
        hours, rem = divmod(abs(total), NANOS_PER_HOUR)
        minutes, rem = divmod(rem, NANOS_PER_MINUTE)
        secs, frac = divmod(rem, NANOS_PER_SECOND)

        parts = ["PT"]
        if hours:
            parts.append(f"{sign}{hours}H")
        if minutes:
            parts.append(f"{sign}{minutes}M")
        if secs or frac or len(parts) == 1:
            text = f"{sign}{secs}"
            if frac:
                text += "." + f"{frac:09d}".rstrip("0")
            parts.append(text + "S")
        return "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


Duration.ZERO = Duration()


__all__ = ["Duration"]
