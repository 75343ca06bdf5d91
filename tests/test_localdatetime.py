"""Tests for the LocalDateTime class."""

from __future__ import annotations

import pytest

from datekoans import (
    ChronoField,
    ChronoUnit,
    DayOfWeek,
    Duration,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Month,
    Period,
)
from datekoans.errors import ArithmeticOverflowError, ParseError, ValidationError


# =============================================================================
# Construction Tests
# =============================================================================


class TestLocalDateTimeConstruction:
    """Tests for LocalDateTime construction."""

    def test_components(self) -> None:
        """Date and time components read back as given."""
        dt = LocalDateTime(2016, 7, 4, 2, 33)
        assert (dt.year, dt.month_value, dt.day_of_month) == (2016, 7, 4)
        assert (dt.hour, dt.minute, dt.second, dt.nano) == (2, 33, 0, 0)
        assert dt.month is Month.JULY
        assert dt.day_of_week is DayOfWeek.MONDAY
        assert dt.day_of_year == 186

    def test_default_time_is_midnight(self) -> None:
        """Leaving out the time gives midnight."""
        assert LocalDateTime(2016, 7, 4).to_local_time() == LocalTime.MIDNIGHT

    def test_of_date_time(self) -> None:
        """of_date_time combines the two halves."""
        dt = LocalDateTime.of_date_time(LocalDate(2016, 7, 4), LocalTime(2, 33))
        assert dt == LocalDateTime.of(2016, Month.JULY, 4, 2, 33)
        assert dt.to_local_date() == LocalDate(2016, 7, 4)

    def test_of_date_time_type_checked(self) -> None:
        """Passing the halves in the wrong order is a TypeError."""
        with pytest.raises(TypeError):
            LocalDateTime.of_date_time(LocalTime(2, 33), LocalDate(2016, 7, 4))  # type: ignore[arg-type]

    def test_invalid(self) -> None:
        """Invalid date or time components are rejected."""
        with pytest.raises(ValidationError):
            LocalDateTime(2017, 2, 29, 0, 0)
        with pytest.raises(ValidationError):
            LocalDateTime(2016, 2, 2, 24, 0)

    def test_constants(self) -> None:
        """MIN and MAX span the supported range."""
        assert LocalDateTime.MIN.to_local_date() == LocalDate.MIN
        assert LocalDateTime.MAX.to_local_time() == LocalTime.MAX


class TestLocalDateTimeFields:
    """Tests for get() and is_supported()."""

    def test_get(self) -> None:
        """get() reads both date and time fields."""
        dt = LocalDateTime(2016, 2, 2, 14, 30)
        assert dt.get(ChronoField.DAY_OF_YEAR) == 33
        assert dt.get(ChronoField.HOUR_OF_AMPM) == 2
        assert dt.get(ChronoField.AMPM_OF_DAY) == 1
        assert dt.get(ChronoField.YEAR) == 2016

    def test_is_supported(self) -> None:
        """Every field and unit is supported."""
        dt = LocalDateTime(2016, 2, 2)
        assert dt.is_supported(ChronoField.HOUR_OF_DAY)
        assert dt.is_supported(ChronoField.EPOCH_DAY)
        assert dt.is_supported(ChronoUnit.MILLENNIA)
        assert dt.is_supported(ChronoUnit.NANOS)


# =============================================================================
# Adjuster and Arithmetic Tests
# =============================================================================


class TestLocalDateTimeAdjusters:
    """Tests for with_* and truncated_to."""

    def test_with_date_parts(self) -> None:
        """Date adjusters keep the time."""
        dt = LocalDateTime(2016, 1, 31, 9, 15)
        assert dt.with_month(2) == LocalDateTime(2016, 2, 29, 9, 15)
        assert dt.with_year(2017) == LocalDateTime(2017, 1, 31, 9, 15)
        assert dt.with_day_of_month(1) == LocalDateTime(2016, 1, 1, 9, 15)
        assert dt.with_day_of_year(33) == LocalDateTime(2016, 2, 2, 9, 15)

    def test_with_time_parts(self) -> None:
        """Time adjusters keep the date."""
        dt = LocalDateTime(2016, 1, 31, 9, 15)
        assert dt.with_hour(0) == LocalDateTime(2016, 1, 31, 0, 15)
        assert dt.with_minute(0) == LocalDateTime(2016, 1, 31, 9, 0)
        assert dt.with_second(5).with_nano(6) == LocalDateTime(2016, 1, 31, 9, 15, 5, 6)

    def test_truncated_to(self) -> None:
        """Truncating to days gives midnight on the same date."""
        dt = LocalDateTime(2016, 1, 31, 9, 15)
        assert dt.truncated_to(ChronoUnit.DAYS) == LocalDateTime(2016, 1, 31)
        assert dt.truncated_to(ChronoUnit.HOURS) == LocalDateTime(2016, 1, 31, 9, 0)


class TestLocalDateTimeArithmetic:
    """Tests for LocalDateTime arithmetic."""

    def test_period_keeps_time_of_day(self) -> None:
        """A year later is the same date and time next year."""
        start = LocalDateTime(2016, 2, 2, 1, 0)
        assert start.plus(Period.of_years(1)) == LocalDateTime(2017, 2, 2, 1, 0)

    def test_duration_is_exact(self) -> None:
        """365 exact days from 2016-02-02 lands on February 1 because of the leap day."""
        start = LocalDateTime(2016, 2, 2, 1, 0)
        assert start.plus(Duration.of_days(365)) == LocalDateTime(2017, 2, 1, 1, 0)

    def test_time_units_roll_the_date(self) -> None:
        """Hours past midnight move to the next day."""
        dt = LocalDateTime(2016, 12, 31, 23, 0)
        assert dt.plus_hours(1) == LocalDateTime(2017, 1, 1, 0, 0)
        assert dt.plus(25, ChronoUnit.HOURS) == LocalDateTime(2017, 1, 2, 0, 0)
        assert LocalDateTime(2016, 1, 1).minus_nanos(1) == LocalDateTime(
            2015, 12, 31, 23, 59, 59, 999_999_999
        )

    def test_date_units(self) -> None:
        """Date-based units change only the date."""
        dt = LocalDateTime(2016, 1, 31, 9, 15)
        assert dt.plus_months(1) == LocalDateTime(2016, 2, 29, 9, 15)
        assert dt.plus(1, ChronoUnit.DECADES) == LocalDateTime(2026, 1, 31, 9, 15)
        assert dt.minus_weeks(1).minus_days(1) == LocalDateTime(2016, 1, 23, 9, 15)
        assert dt.plus_years(1).minus_years(1) == dt

    def test_minus_period_and_duration(self) -> None:
        """minus() negates either kind of amount."""
        dt = LocalDateTime(2016, 3, 1, 0, 30)
        assert dt.minus(Period.of_days(1)) == LocalDateTime(2016, 2, 29, 0, 30)
        assert dt.minus(Duration.of_hours(1)) == LocalDateTime(2016, 2, 29, 23, 30)
        assert dt.minus_minutes(30).minus_seconds(1) == LocalDateTime(2016, 2, 29, 23, 59, 59)

    def test_operators(self) -> None:
        """+ and - accept both Period and Duration."""
        dt = LocalDateTime(2016, 2, 2, 1, 0)
        assert dt + Period.of_years(1) == LocalDateTime(2017, 2, 2, 1, 0)
        assert Duration.of_hours(1) + dt == LocalDateTime(2016, 2, 2, 2, 0)
        assert dt - Duration.of_hours(2) == LocalDateTime(2016, 2, 1, 23, 0)

    def test_difference_is_duration(self) -> None:
        """Subtracting date-times gives the exact Duration."""
        start = LocalDateTime(2016, 2, 2, 1, 0)
        end = LocalDateTime(2017, 2, 2, 1, 0)
        assert end - start == Duration.of_days(366)
        assert start - end == Duration.of_days(-366)

    def test_overflow(self) -> None:
        """Rolling past the last date overflows."""
        with pytest.raises(ArithmeticOverflowError):
            LocalDateTime.MAX.plus_nanos(1)


# =============================================================================
# Query Tests
# =============================================================================


class TestLocalDateTimeUntil:
    """Tests for until()."""

    def test_time_units_are_exact(self) -> None:
        """Hours between date-times count across days."""
        start = LocalDateTime(2016, 2, 2, 1, 0)
        end = LocalDateTime(2016, 2, 3, 0, 59)
        assert start.until(end, ChronoUnit.HOURS) == 23
        assert start.until(end, ChronoUnit.MINUTES) == 1439
        assert end.until(start, ChronoUnit.HOURS) == -23

    def test_days_need_the_time_of_day(self) -> None:
        """The final day counts only once its time of day is reached."""
        start = LocalDateTime(2016, 2, 2, 1, 0)
        assert start.until(LocalDateTime(2017, 2, 2, 1, 0), ChronoUnit.DAYS) == 366
        assert start.until(LocalDateTime(2017, 2, 2, 0, 59), ChronoUnit.DAYS) == 365
        assert start.until(LocalDateTime(2017, 2, 2, 0, 59), ChronoUnit.YEARS) == 0

    def test_backwards(self) -> None:
        """Going back counts negatively with the same rule."""
        start = LocalDateTime(2016, 2, 3, 1, 0)
        assert start.until(LocalDateTime(2016, 2, 1, 2, 0), ChronoUnit.DAYS) == -1

    def test_comparisons(self) -> None:
        """Ordering uses the date, then the time."""
        a = LocalDateTime(2016, 2, 2, 23, 0)
        b = LocalDateTime(2016, 2, 3, 1, 0)
        assert a.is_before(b)
        assert b.is_after(a)
        assert a.is_equal(LocalDate(2016, 2, 2).at_time(23, 0))
        assert a < b and b >= a and a != b
        assert hash(a) == hash(LocalDateTime(2016, 2, 2, 23, 0))


# =============================================================================
# Text Tests
# =============================================================================


class TestLocalDateTimeText:
    """Tests for ISO text."""

    def test_iso(self) -> None:
        """The date and time are joined by T."""
        assert str(LocalDateTime(2016, 7, 4, 2, 33)) == "2016-07-04T02:33"
        assert LocalDateTime(2016, 7, 4, 2, 33, 5).to_iso_format() == "2016-07-04T02:33:05"

    def test_repr(self) -> None:
        """repr() shows every component."""
        assert (
            repr(LocalDateTime(2016, 7, 4, 2, 33))
            == "LocalDateTime(2016, 7, 4, 2, 33, 0, nanosecond=0)"
        )

    def test_parse(self) -> None:
        """ISO text parses with optional seconds."""
        assert LocalDateTime.parse("2016-07-04T02:33") == LocalDateTime(2016, 7, 4, 2, 33)
        assert LocalDateTime.parse("2016-07-04T02:33:05.25") == LocalDateTime(
            2016, 7, 4, 2, 33, 5, 250_000_000
        )

    @pytest.mark.parametrize(
        "text",
        [
            "2016-07-04",
            "2016-07-04 02:33",
            "2016-07-04T2:33",
            "",
            "2016-07-04T02:33\n",
            "2016-07-04T\u0660\u0662:33",
        ],
    )
    def test_parse_invalid(self, text: str) -> None:
        """Malformed text raises ParseError."""
        with pytest.raises(ParseError):
            LocalDateTime.parse(text)
