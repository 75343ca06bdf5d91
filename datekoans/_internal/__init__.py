"""Internal utilities for datekoans.

This module contains private implementation details:
    - Constants and unit conversions
    - Proleptic Gregorian calendar math
    - Range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datekoans._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
