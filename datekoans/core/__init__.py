"""Core temporal types.

This module provides the local date and time value types:
    - LocalDate: Calendar date in the proleptic Gregorian calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: A LocalDate combined with a LocalTime
    - Period: Calendar-based amount (years, months, days)
    - Duration: Exact amount of time (seconds and nanoseconds)
"""

from __future__ import annotations

from datekoans.core.duration import Duration
from datekoans.core.localdate import LocalDate
from datekoans.core.localdatetime import LocalDateTime
from datekoans.core.localtime import LocalTime
from datekoans.core.period import Period

__all__: list[str] = [
    "Duration",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Period",
]
