"""DayOfWeek enumeration, Monday through Sunday."""

from __future__ import annotations

from enum import Enum

from datekoans.errors import ValidationError


class DayOfWeek(Enum):
    """A day of the week, ISO numbered MONDAY (1) through SUNDAY (7).

    Examples:
        >>> DayOfWeek.SATURDAY.plus(2)
        <DayOfWeek.MONDAY: 1>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Return the DayOfWeek for an ISO number 1-7."""
        if isinstance(day_of_week, DayOfWeek):
            return day_of_week
        if isinstance(day_of_week, bool) or not isinstance(day_of_week, int) or not 1 <= day_of_week <= 7:
            raise ValidationError(
                f"day of week must be between 1 and 7, got {day_of_week!r}"
            )
        return cls(day_of_week)

    def plus(self, days: int) -> DayOfWeek:
        """Return the day a number of days later."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        """Return the day a number of days earlier."""
        return self.plus(-days)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return self.name[:3].capitalize()


__all__ = ["DayOfWeek"]
