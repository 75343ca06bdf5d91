"""Tests for the internal calendar and validation helpers."""

from __future__ import annotations

import pytest

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
from datekoans._internal.mathutil import trunc_div
from datekoans._internal.validation import (
    check_year_in_range,
    validate_day,
    validate_range,
)
from datekoans.errors import ArithmeticOverflowError, ValidationError


class TestLeapYears:
    """Tests for leap-year rules."""

    @pytest.mark.parametrize("year", [2016, 2000, 2400, 0, -4])
    def test_leap_years(self, year: int) -> None:
        """Years divisible by 4 (and by 400 for centuries) are leap years."""
        assert is_leap_year(year)
        assert days_in_year(year) == 366

    @pytest.mark.parametrize("year", [2017, 1900, 2100, -1])
    def test_common_years(self, year: int) -> None:
        """Other years, and centuries not divisible by 400, are common."""
        assert not is_leap_year(year)
        assert days_in_year(year) == 365

    def test_february_length(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2016, 2) == 29
        assert days_in_month(2017, 2) == 28

    def test_invalid_month(self) -> None:
        """Month 13 is rejected."""
        with pytest.raises(ValueError):
            days_in_month(2016, 13)


class TestEpochDays:
    """Tests for conversion between dates and epoch days."""

    def test_epoch(self) -> None:
        """1970-01-01 is epoch day 0."""
        assert ymd_to_epoch_day(1970, 1, 1) == 0
        assert epoch_day_to_ymd(0) == (1970, 1, 1)

    def test_known_dates(self) -> None:
        """Groundhog days 2016 and 2017 are 366 days apart."""
        assert ymd_to_epoch_day(2016, 2, 2) == 16833
        assert ymd_to_epoch_day(2017, 2, 2) == 17199

    def test_before_epoch(self) -> None:
        """Dates before 1970 have negative epoch days."""
        assert ymd_to_epoch_day(1969, 12, 31) == -1
        assert epoch_day_to_ymd(-1) == (1969, 12, 31)

    @pytest.mark.parametrize(
        "ymd",
        [
            (2016, 2, 29),
            (2000, 12, 31),
            (1600, 12, 31),
            (0, 1, 1),
            (-1, 12, 31),
            (-9999, 1, 1),
            (9999, 12, 31),
        ],
    )
    def test_cycle_boundaries(self, ymd: tuple[int, int, int]) -> None:
        """Conversion is exact at leap days and 400-year cycle ends."""
        assert epoch_day_to_ymd(ymd_to_epoch_day(*ymd)) == ymd

    def test_supported_range(self) -> None:
        """The supported range is -9999-01-01 to 9999-12-31."""
        assert ymd_to_epoch_day(-9999, 1, 1) == -4_371_587
        assert ymd_to_epoch_day(9999, 12, 31) == 2_932_896

    def test_day_of_week(self) -> None:
        """1970-01-01 was a Thursday and 2016-02-02 a Tuesday."""
        assert epoch_day_to_iso_day_of_week(0) == 4
        assert epoch_day_to_iso_day_of_week(16833) == 2
        assert epoch_day_to_iso_day_of_week(-1) == 3


class TestDayOfYear:
    """Tests for day-of-year helpers."""

    def test_days_before_month(self) -> None:
        """March starts one day later in a leap year."""
        assert days_before_month(2017, 3) == 59
        assert days_before_month(2016, 3) == 60

    def test_day_of_year_to_md(self) -> None:
        """Day 33 is February 2."""
        assert day_of_year_to_md(2016, 33) == (2, 2)
        assert day_of_year_to_md(2016, 366) == (12, 31)

    def test_day_of_year_out_of_range(self) -> None:
        """Day 366 does not exist in a common year."""
        with pytest.raises(ValueError):
            day_of_year_to_md(2017, 366)


class TestValidationHelpers:
    """Tests for range validation."""

    def test_validate_range_returns_value(self) -> None:
        """A valid value is returned unchanged."""
        assert validate_range("hour", 23, 0, 23) == 23

    def test_validate_range_message(self) -> None:
        """The message names the component and the range."""
        with pytest.raises(ValidationError, match="hour must be between 0 and 23, got 24"):
            validate_range("hour", 24, 0, 23)

    def test_validate_range_rejects_bool(self) -> None:
        """Booleans are not accepted as integers."""
        with pytest.raises(ValidationError):
            validate_range("hour", True, 0, 23)

    def test_validate_day(self) -> None:
        """February 29 is invalid in a common year."""
        validate_day(2016, 2, 29)
        with pytest.raises(ValidationError, match="2017-02"):
            validate_day(2017, 2, 29)

    def test_check_year_in_range(self) -> None:
        """Years past 9999 are an overflow."""
        check_year_in_range(9999)
        with pytest.raises(ArithmeticOverflowError):
            check_year_in_range(10000)


class TestTruncDiv:
    """Tests for division rounding toward zero."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)],
    )
    def test_trunc_div(self, a: int, b: int, expected: int) -> None:
        """The quotient is truncated toward zero."""
        assert trunc_div(a, b) == expected
