"""Units and fields used by the datekoans value types.

Units:
    Month: JANUARY through DECEMBER
    DayOfWeek: MONDAY through SUNDAY
    ChronoUnit: NANOS through MILLENNIA
    ChronoField: readable components such as DAY_OF_YEAR
"""

from __future__ import annotations

from datekoans.units.chronofield import ChronoField
from datekoans.units.chronounit import ChronoUnit
from datekoans.units.dayofweek import DayOfWeek
from datekoans.units.month import Month

__all__: list[str] = ["ChronoField", "ChronoUnit", "DayOfWeek", "Month"]
