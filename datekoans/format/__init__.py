"""Pattern formatting and parsing.

This module converts local date and time values to and from text:
    - DateTimeFormatter.of_pattern: formatter for a pattern such as
      "MM/dd/yyyy HH:mm"
    - DateTimeFormatter.ISO_LOCAL_DATE, ISO_LOCAL_TIME and
      ISO_LOCAL_DATE_TIME: ISO 8601 formatters

Examples:
    >>> from datekoans import LocalDate
    >>> from datekoans.format import DateTimeFormatter

    >>> DateTimeFormatter.ISO_LOCAL_DATE.format(LocalDate(2016, 2, 2))
    '2016-02-02'
"""

from __future__ import annotations

from datekoans.format.formatter import DateTimeFormatter

__all__: list[str] = ["DateTimeFormatter"]
