"""Koans about local dates, times, periods, durations and formatting.

Dates and times come in separate flavours. A blog post "3 minutes ago"
needs a date and a time; a tax deadline needs only a date; a weekly
11:00 meeting needs only a time. Each concept has its own immutable
type, and none of them carries a time zone, hence "local".

There is no LocalDate.now(): a koan that depends on today's date would
give a different answer every day.
"""

from __future__ import annotations

from datekoans.core import Duration, LocalDate, LocalDateTime, LocalTime, Period
from datekoans.format import DateTimeFormatter
from datekoans.koan import assert_equals, assert_true, koan, suite
from datekoans.units import ChronoField, ChronoUnit, Month


@suite
class AboutLocalDate:
    @koan
    def date_replaced_with_locals(self) -> None:
        """LocalDate is a date without a time, LocalTime a time without a date.

        A date can still be asked for a field by constant, but times have
        a dedicated accessor per component.
        """
        groundhog_day = LocalDate.of(2016, Month.FEBRUARY, 2)
        day_of_year = groundhog_day.get(ChronoField.DAY_OF_YEAR)

        assert_equals(day_of_year, 33)

        time = LocalTime.of(2, 30, 45)
        assert_equals(time.hour, 2)
        assert_equals(time.minute, 30)
        assert_equals(time.second, 45)

    @koan
    def math(self) -> None:
        """Spring break starts on March 12 and lasts 7 days.

        The values are immutable: plus_days() returns a new date and the
        start date is left as it was.
        """
        spring_break_start = LocalDate.of(2016, Month.MARCH, 12)
        spring_break_end = spring_break_start.plus_days(7)

        assert_equals(spring_break_start.day_of_month, 12)
        assert_equals(spring_break_end.day_of_month, 19)

    @koan
    def periods(self) -> None:
        """A Period is a calendar amount, handy for recurring events."""
        quarter = Period.of_months(3)
        quarterly_meeting = LocalDate.of(2016, Month.FEBRUARY, 2)
        next_meeting = quarterly_meeting.plus(quarter)

        assert_equals(next_meeting.day_of_month, 2)

    @koan
    def duration(self) -> None:
        """A Duration is exact; a Period follows the calendar.

        February 1 to March 1 is always one month, but the number of
        days in between depends on whether the year is a leap year.
        """
        one_year_period = Period.of_years(1)
        one_year_duration = Duration.of_days(365)

        groundhog_day_2016 = LocalDateTime.of(2016, Month.FEBRUARY, 2, 1, 0)
        groundhog_day_2017 = groundhog_day_2016.plus(one_year_period)
        not_groundhog_day_2017 = groundhog_day_2016.plus(one_year_duration)
        leap_year_duration = Duration.between(groundhog_day_2016, groundhog_day_2017)

        assert_equals(groundhog_day_2017.day_of_month, 2)
        assert_equals(not_groundhog_day_2017.day_of_month, 1)

        leap_year_days = leap_year_duration.to_days()
        assert_equals(leap_year_days, 366)
        assert_true(leap_year_days != one_year_duration.to_days())

    @koan
    def formatting(self) -> None:
        """A formatter is built once from a pattern and then reused."""
        formatter = DateTimeFormatter.of_pattern("MM/dd/yyyy HH:mm")

        july_4th = LocalDateTime.of(2016, Month.JULY, 4, 2, 33)

        assert_equals(formatter.format(july_4th), "07/04/2016 02:33")

    @koan
    def local_time(self) -> None:
        t1 = LocalTime.of(7, 30)
        assert_equals(t1, LocalTime.parse("07:30"))

    @koan
    def local_time_minus(self) -> None:
        t1 = LocalTime.parse("10:30")
        t2 = t1.minus(2, ChronoUnit.HOURS)
        assert_equals(t2, LocalTime.parse("08:30"))


__all__ = ["AboutLocalDate"]
