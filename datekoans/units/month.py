"""Month enumeration for the twelve months of the year."""

from __future__ import annotations

from enum import Enum

from datekoans.errors import ValidationError


class Month(Enum):
    """A month of the year, JANUARY (1) through DECEMBER (12).

    Month can be passed anywhere a month number is accepted, which
    reads better in code than a bare integer.

    Examples:
        >>> Month.FEBRUARY.value
        2
        >>> Month.FEBRUARY.length(leap_year=True)
        29
        >>> Month.NOVEMBER.plus(3)
        <Month.FEBRUARY: 2>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Return the Month for a number 1-12.

        Raises:
            ValidationError: If month is outside 1-12.
        """
        if isinstance(month, Month):
            return month
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise ValidationError(f"month must be between 1 and 12, got {month!r}")
        return cls(month)

    def length(self, leap_year: bool) -> int:
        """Return the number of days in this month."""
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER):
            return 30
        return 31

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year of the first day of this month.

        Examples:
            >>> Month.MARCH.first_day_of_year(leap_year=False)
            60
            >>> Month.MARCH.first_day_of_year(leap_year=True)
            61
        """
        return sum(m.length(leap_year) for m in Month if m.value < self.value) + 1

    def plus(self, months: int) -> Month:
        """Return the month a number of months later, wrapping around December."""
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        """Return the month a number of months earlier."""
        return self.plus(-months)

    @property
    def display_name(self) -> str:
        """Full English name, e.g. "February"."""
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        """Three-letter English abbreviation, e.g. "Feb"."""
        return self.name[:3].capitalize()


__all__ = ["Month"]
