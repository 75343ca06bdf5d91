"""Tests for the Duration class.

Duration is an exact span of seconds and nanoseconds, with no notion
of calendar months or leap years.
"""

from __future__ import annotations

import pytest

from datekoans import ChronoUnit, Duration, LocalDateTime, LocalTime
from datekoans.errors import ParseError, UnsupportedUnitError


# =============================================================================
# Construction Tests
# =============================================================================


class TestDurationConstruction:
    """Tests for Duration construction and normalization."""

    def test_default_is_zero(self) -> None:
        """Duration() is zero."""
        assert Duration() == Duration.ZERO
        assert Duration().is_zero

    def test_nanos_are_normalized(self) -> None:
        """Nanos are folded into seconds and kept in [0, 1e9)."""
        d = Duration(seconds=3, nanos=-1)
        assert d.seconds == 2
        assert d.nano == 999_999_999

    def test_negative_fraction(self) -> None:
        """-1.5 seconds is -2 seconds plus half a second."""
        d = Duration.of_millis(-1500)
        assert d.seconds == -2
        assert d.nano == 500_000_000
        assert d.is_negative

    def test_factories(self) -> None:
        """Each factory produces the exact number of seconds."""
        assert Duration.of_days(1).seconds == 86_400
        assert Duration.of_hours(2).seconds == 7_200
        assert Duration.of_minutes(3).seconds == 180
        assert Duration.of_seconds(4, 5).nano == 5
        assert Duration.of_nanos(1_000_000_001) == Duration(1, 1)

    def test_of_unit(self) -> None:
        """of() accepts exact units, with DAYS as 24 hours."""
        assert Duration.of(2, ChronoUnit.HOURS) == Duration.of_hours(2)
        assert Duration.of(1, ChronoUnit.DAYS) == Duration.of_hours(24)

    @pytest.mark.parametrize("unit", [ChronoUnit.WEEKS, ChronoUnit.MONTHS, ChronoUnit.YEARS])
    def test_of_estimated_unit_rejected(self, unit: ChronoUnit) -> None:
        """Units without an exact length are rejected."""
        with pytest.raises(UnsupportedUnitError):
            Duration.of(1, unit)


class TestDurationBetween:
    """Tests for Duration.between."""

    def test_between_date_times_across_leap_day(self) -> None:
        """A calendar year that contains February 29 lasts 366 days."""
        start = LocalDateTime(2016, 2, 2, 1, 0)
        end = LocalDateTime(2017, 2, 2, 1, 0)
        assert Duration.between(start, end).to_days() == 366

    def test_between_is_signed(self) -> None:
        """The result is negative when end is before start."""
        start = LocalTime(10, 30)
        end = LocalTime(8, 30)
        assert Duration.between(start, end) == Duration.of_hours(-2)

    def test_between_keeps_nanos(self) -> None:
        """Nanosecond differences are exact."""
        start = LocalTime(0, 0, 0, 1)
        end = LocalTime(0, 0, 1)
        assert Duration.between(start, end).to_nanos() == 999_999_999


# =============================================================================
# Conversion Tests
# =============================================================================


class TestDurationConversions:
    """Tests for to_* conversions."""

    def test_to_units(self) -> None:
        """Conversions truncate to whole units."""
        d = Duration.of_seconds(90_061, 500_000_000)
        assert d.to_days() == 1
        assert d.to_hours() == 25
        assert d.to_minutes() == 1501
        assert d.to_seconds() == 90_061
        assert d.to_millis() == 90_061_500

    def test_negative_truncates_toward_zero(self) -> None:
        """-1.5 days is -1 whole day, not -2."""
        assert Duration.of_hours(-36).to_days() == -1
        assert Duration.of_millis(-1500).to_seconds() == -1

    def test_parts(self) -> None:
        """Part accessors split the duration into clock components."""
        d = Duration.of_seconds(90_061)
        assert d.to_hours_part() == 1
        assert d.to_minutes_part() == 1
        assert d.to_seconds_part() == 1

    def test_get(self) -> None:
        """get() reads SECONDS and NANOS only."""
        d = Duration(5, 7)
        assert d.get(ChronoUnit.SECONDS) == 5
        assert d.get(ChronoUnit.NANOS) == 7
        with pytest.raises(UnsupportedUnitError):
            d.get(ChronoUnit.DAYS)


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestDurationArithmetic:
    """Tests for Duration arithmetic."""

    def test_plus_and_minus(self) -> None:
        """Durations add and subtract exactly."""
        d = Duration.of_hours(1).plus(Duration.of_minutes(30))
        assert d == Duration.of_minutes(90)
        assert d.minus(Duration.of_minutes(90)).is_zero

    def test_plus_unit_methods(self) -> None:
        """plus_* and minus_* add the named unit."""
        d = Duration.ZERO.plus_days(1).plus_hours(1).minus_minutes(60)
        assert d == Duration.of_days(1)
        assert Duration.ZERO.plus_millis(1).plus_nanos(1).to_nanos() == 1_000_001

    def test_plus_estimated_unit_rejected(self) -> None:
        """Months cannot be added to an exact duration."""
        with pytest.raises(UnsupportedUnitError):
            Duration.ZERO.plus(1, ChronoUnit.MONTHS)

    def test_multiply_and_divide(self) -> None:
        """Scaling keeps nanosecond precision."""
        assert Duration.of_minutes(20).multiplied_by(3) == Duration.of_hours(1)
        assert Duration.of_seconds(10).divided_by(4) == Duration.of_millis(2500)
        assert Duration.of_seconds(-7).divided_by(2) == Duration.of_millis(-3500)

    def test_divide_by_zero(self) -> None:
        """Division by zero raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Duration.of_seconds(1).divided_by(0)

    def test_negated_and_abs(self) -> None:
        """negated() flips the sign and abs() drops it."""
        d = Duration.of_millis(1500)
        assert d.negated() == Duration.of_millis(-1500)
        assert d.negated().abs() == d

    def test_operators(self) -> None:
        """Operators mirror the named methods."""
        one = Duration.of_seconds(1)
        assert one + one == Duration.of_seconds(2)
        assert one - one == Duration.ZERO
        assert one * 3 == 3 * one == Duration.of_seconds(3)
        assert Duration.of_seconds(100) // 3 == Duration(33, 333_333_333)
        assert -one == Duration.of_seconds(-1)
        assert abs(-one) == one
        assert sum([one, one, one]) == Duration.of_seconds(3)

    def test_add_to_temporal(self) -> None:
        """add_to and subtract_from move a temporal value."""
        t = LocalTime(10, 0)
        assert Duration.of_hours(2).add_to(t) == LocalTime(12, 0)
        assert Duration.of_hours(2).subtract_from(t) == LocalTime(8, 0)

    def test_foreign_operand(self) -> None:
        """Adding a number to a Duration is a TypeError."""
        with pytest.raises(TypeError):
            Duration.of_seconds(1) + 1  # type: ignore[operator]


class TestDurationComparison:
    """Tests for ordering and equality."""

    def test_ordering(self) -> None:
        """Durations order by length."""
        assert Duration.of_days(365) < Duration.of_days(366)
        assert Duration.of_seconds(-1) < Duration.ZERO
        assert max(Duration.of_hours(1), Duration.of_minutes(61)) == Duration.of_minutes(61)

    def test_hash(self) -> None:
        """Equal durations hash the same."""
        assert hash(Duration.of_hours(24)) == hash(Duration.of_days(1))

    def test_bool(self) -> None:
        """Only the zero duration is falsy."""
        assert not Duration.ZERO
        assert Duration.of_nanos(1)


# =============================================================================
# Text Tests
# =============================================================================


class TestDurationText:
    """Tests for ISO 8601 text."""

    @pytest.mark.parametrize(
        "duration, text",
        [
            (Duration.ZERO, "PT0S"),
            (Duration.of_days(366), "PT8784H"),
            (Duration.of_minutes(90), "PT1H30M"),
            (Duration.of_millis(1500), "PT1.5S"),
            (Duration.of_seconds(-90, 500_000_000), "PT-1M-29.5S"),
        ],
    )
    def test_str(self, duration: Duration, text: str) -> None:
        """str() is ISO 8601 with hours as the largest unit."""
        assert str(duration) == text

    def test_repr(self) -> None:
        """repr() shows seconds and nanos."""
        assert repr(Duration.of_days(1)) == "Duration(seconds=86400, nanos=0)"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("PT8784H", Duration.of_days(366)),
            ("P2DT3H", Duration.of_hours(51)),
            ("PT8H6M12.345S", Duration(29_172, 345_000_000)),
            ("PT-2H", Duration.of_hours(-2)),
            ("-PT1M", Duration.of_minutes(-1)),
            ("PT-0.5S", Duration.of_millis(-500)),
        ],
    )
    def test_parse(self, text: str, expected: Duration) -> None:
        """ISO 8601 durations parse to exact values."""
        assert Duration.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "P", "PT", "1H", "P1Y", "PT1.5H", "PT\uff11H"])
    def test_parse_invalid(self, text: str) -> None:
        """Malformed text raises ParseError."""
        with pytest.raises(ParseError):
            Duration.parse(text)
