"""ChronoUnit enumeration for standard units of time.

ChronoUnit names the unit in calls like ``time.minus(2, ChronoUnit.HOURS)``.
Units up to DAYS have an exact length; WEEKS and longer are calendar
units whose real length depends on the date they are applied to.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from datekoans._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)

if TYPE_CHECKING:
    from datekoans.core.duration import Duration


class ChronoUnit(Enum):
    """Standard units of time, from nanoseconds up to millennia.

    Examples:
        >>> ChronoUnit.HOURS.is_time_based
        True
        >>> ChronoUnit.MONTHS.is_date_based
        True
        >>> ChronoUnit.DAYS.is_duration_estimated
        True
        >>> ChronoUnit.HOURS.duration
        Duration(seconds=3600, nanos=0)
    """

    NANOS = "Nanos"
    MICROS = "Micros"
    MILLIS = "Millis"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    HALF_DAYS = "HalfDays"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"

    @property
    def nanos(self) -> int:
        """Return the (estimated, for calendar units) length in nanoseconds.

        A year is estimated as 365.2425 days and a month as a twelfth of
        that, the averages of the Gregorian cycle.
        """
        return _UNIT_NANOS[self]

    @property
    def duration(self) -> Duration:
        """Return the (estimated, for calendar units) length as a Duration."""
        from datekoans.core.duration import Duration

        return Duration.of_nanos(self.nanos)

    @property
    def is_time_based(self) -> bool:
        """True for NANOS through HALF_DAYS."""
        return _ORDER.index(self) < _ORDER.index(ChronoUnit.DAYS)

    @property
    def is_date_based(self) -> bool:
        """True for DAYS and longer."""
        return _ORDER.index(self) >= _ORDER.index(ChronoUnit.DAYS)

    @property
    def is_duration_estimated(self) -> bool:
        """True if the length varies with the calendar (DAYS and longer).

        A DAYS unit on a local date-time is a calendar day, which is why
        it counts as estimated even though it is 24 hours here.
        """
        return self.is_date_based

    def __str__(self) -> str:
        return self.value


_ORDER: list[ChronoUnit] = list(ChronoUnit)

_SECONDS_PER_YEAR_ESTIMATE = 31_556_952  # 365.2425 days

_UNIT_NANOS: dict[ChronoUnit, int] = {
    ChronoUnit.NANOS: 1,
    ChronoUnit.MICROS: NANOS_PER_MICROSECOND,
    ChronoUnit.MILLIS: NANOS_PER_MILLISECOND,
    ChronoUnit.SECONDS: NANOS_PER_SECOND,
    ChronoUnit.MINUTES: NANOS_PER_MINUTE,
    ChronoUnit.HOURS: NANOS_PER_HOUR,
    ChronoUnit.HALF_DAYS: 12 * NANOS_PER_HOUR,
    ChronoUnit.DAYS: NANOS_PER_DAY,
    ChronoUnit.WEEKS: 7 * NANOS_PER_DAY,
    ChronoUnit.MONTHS: _SECONDS_PER_YEAR_ESTIMATE // 12 * NANOS_PER_SECOND,
    ChronoUnit.YEARS: _SECONDS_PER_YEAR_ESTIMATE * NANOS_PER_SECOND,
    ChronoUnit.DECADES: 10 * _SECONDS_PER_YEAR_ESTIMATE * NANOS_PER_SECOND,
    ChronoUnit.CENTURIES: 100 * _SECONDS_PER_YEAR_ESTIMATE * NANOS_PER_SECOND,
    ChronoUnit.MILLENNIA: 1000 * _SECONDS_PER_YEAR_ESTIMATE * NANOS_PER_SECOND,
}


__all__ = ["ChronoUnit"]
