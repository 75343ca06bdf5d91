"""Pattern-based formatting and parsing.

This module provides DateTimeFormatter, which converts LocalDate,
LocalTime and LocalDateTime values to and from text laid out by a
pattern such as "MM/dd/yyyy HH:mm".

Pattern Letters:
    y, u  - year ("yy" is two digits, base 2000)
    M     - month (M, MM, MMM = Jan, MMMM = January)
    d     - day of month (d, dd)
    D     - day of year (D, DD, DDD)
    E     - day of week (E to EEE = Mon, EEEE = Monday)
    a     - AM/PM marker
    H     - hour of day, 0-23 (H, HH)
    h     - clock hour of AM/PM, 1-12 (h, hh)
    m     - minute (m, mm)
    s     - second (s, ss)
    S     - fraction of second, 1 to 9 digits
    '...' - literal text; '' is a single quote

Any other character that is not a letter is copied as is. Month and
day names are English; there is no locale support.

Examples:
    >>> from datekoans import LocalDateTime
    >>> fmt = DateTimeFormatter.of_pattern("MM/dd/yyyy HH:mm")
    >>> fmt.format(LocalDateTime(2016, 7, 4, 2, 33))
    '07/04/2016 02:33'
    >>> fmt.parse("07/04/2016 02:33")
    LocalDateTime(2016, 7, 4, 2, 33, 0, nanosecond=0)
"""

from __future__ import annotations

import re
from typing import NamedTuple, Union

from datekoans.core.localdate import LocalDate
from datekoans.core.localdatetime import LocalDateTime
from datekoans.core.localtime import LocalTime
from datekoans.errors import (
    ParseError,
    PatternError,
    UnsupportedFieldError,
    ValidationError,
)
from datekoans.units.chronofield import ChronoField
from datekoans.units.dayofweek import DayOfWeek
from datekoans.units.month import Month

# Type alias for the values a formatter works with
TemporalType = Union[LocalDate, LocalTime, LocalDateTime]


class _Field(NamedTuple):
    letter: str
    count: int


# Maximum number of repeated letters for each supported letter
_MAX_WIDTH: dict[str, int] = {
    "y": 9,
    "u": 9,
    "M": 4,
    "d": 2,
    "D": 3,
    "E": 4,
    "a": 1,
    "H": 2,
    "h": 2,
    "m": 2,
    "s": 2,
    "S": 9,
}

_MONTH_SHORT = {m.short_name: m.value for m in Month}
_MONTH_FULL = {m.display_name: m.value for m in Month}
_DAY_SHORT = {d.short_name: d.value for d in DayOfWeek}
_DAY_FULL = {d.display_name: d.value for d in DayOfWeek}

# Two-digit years are read as 2000-2099
_TWO_DIGIT_YEAR_BASE = 2000


def _tokenize(pattern: str) -> list[str | _Field]:
    """Split a pattern into literal strings and field tokens.

    Raises:
        PatternError: On an unknown letter, too many letters or an
            unterminated quote.
    """
    tokens: list[str | _Field] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            if pattern.startswith("''", i):
                tokens.append("'")
                i += 2
                continue
            # Quoted literal; '' inside quotes is an escaped quote
            i += 1
            literal = []
            while True:
                if i >= len(pattern):
                    raise PatternError(f"unterminated quote in pattern {pattern!r}")
                if pattern[i] == "'":
                    if pattern.startswith("''", i):
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            tokens.append("".join(literal))
        elif char.isascii() and char.isalpha():
            if char not in _MAX_WIDTH:
                raise PatternError(f"unknown pattern letter {char!r} in {pattern!r}")
            start = i
            while i < len(pattern) and pattern[i] == char:
                i += 1
            count = i - start
            if count > _MAX_WIDTH[char]:
                raise PatternError(
                    f"too many pattern letters {char * count!r} in {pattern!r}"
                )
            tokens.append(_Field(char, count))
        else:
            tokens.append(char)
            i += 1
    return tokens


def _alternation(names: dict[str, int]) -> str:
    # Longest first so "May" cannot shadow a longer name
    return "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))


def _field_regex(field: _Field) -> str:
    letter, count = field
    if letter in "yu":
        if count == 2:
            return r"[0-9]{2}"
        return rf"[+-]?[0-9]{{{count},9}}"
    if letter == "M":
        if count == 3:
            return _alternation(_MONTH_SHORT)
        if count == 4:
            return _alternation(_MONTH_FULL)
    if letter == "E":
        return _alternation(_DAY_FULL if count == 4 else _DAY_SHORT)
    if letter == "a":
        return "AM|PM"
    if letter == "S":
        return rf"[0-9]{{{count}}}"
    if letter == "D":
        return rf"[0-9]{{{count},3}}"
    # Numeric fields of one or two digits
    return r"[0-9]{1,2}" if count == 1 else r"[0-9]{2}"


def _pad(value: int, width: int) -> str:
    if value < 0:
        return "-" + str(-value).zfill(width)
    return str(value).zfill(width)


class _Parsed(NamedTuple):
    date: LocalDate | None
    time: LocalTime | None


class DateTimeFormatter:
    """Formats and parses local date-time values with a fixed pattern.

    A formatter is built once from a pattern and is immutable. Formatting
    asks the value for each field the pattern names, so a pattern with
    hours cannot format a LocalDate. Parsing returns the most complete
    value the text describes.

    Attributes:
        pattern: The pattern the formatter was built from.

    Examples:
        >>> from datekoans import LocalDate
        >>> fmt = DateTimeFormatter.of_pattern("EEEE, MMMM d, yyyy")
        >>> fmt.format(LocalDate(2016, 2, 2))
        'Tuesday, February 2, 2016'

        >>> DateTimeFormatter.of_pattern("HH:mm").parse("07:30")
        LocalTime(7, 30, 0, nanosecond=0)
    """

    __slots__ = ("_pattern", "_tokens", "_regex", "_groups")

    ISO_LOCAL_DATE: DateTimeFormatter
    ISO_LOCAL_TIME: DateTimeFormatter
    ISO_LOCAL_DATE_TIME: DateTimeFormatter

    def __init__(self, pattern: str) -> None:
        """Compile a pattern.

        Raises:
            PatternError: If the pattern is malformed.
        """
        self._pattern = pattern
        self._tokens = _tokenize(pattern)

        parts = []
        self._groups: dict[str, _Field] = {}
        for token in self._tokens:
            if isinstance(token, _Field):
                name = f"f{len(self._groups)}"
                self._groups[name] = token
                parts.append(f"(?P<{name}>{_field_regex(token)})")
            else:
                parts.append(re.escape(token))
        self._regex = re.compile("".join(parts))

    @classmethod
    def of_pattern(cls, pattern: str) -> DateTimeFormatter:
        """Create a formatter from a pattern such as "MM/dd/yyyy HH:mm".

        Raises:
            PatternError: If the pattern is malformed.
        """
        return cls(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    # Formatting

    def format(self, value: TemporalType) -> str:
        """Format a value with this pattern.

        Raises:
            UnsupportedFieldError: If the pattern names a field the value
                does not have, such as hours on a LocalDate.
            TypeError: If value is not a local date or time type.

        Examples:
            >>> from datekoans import LocalTime
            >>> DateTimeFormatter.of_pattern("h:mm a").format(LocalTime(14, 5))
            '2:05 PM'
        """
        if not isinstance(value, (LocalDate, LocalTime, LocalDateTime)):
            raise TypeError(
                f"expected LocalDate, LocalTime or LocalDateTime, got {type(value).__name__}"
            )
        result = []
        for token in self._tokens:
            if isinstance(token, _Field):
                result.append(_format_field(value, token))
            else:
                result.append(token)
        return "".join(result)

    # Parsing

    def parse(self, text: str) -> TemporalType:
        """Parse text into a LocalDateTime, LocalDate or LocalTime.

        The result is a LocalDateTime when the pattern has both date and
        time fields, otherwise whichever of the two it has.

        Raises:
            ParseError: If the text does not match the pattern or names
                an invalid date or time.
        """
        parsed = self._parse(text)
        if parsed.date is not None and parsed.time is not None:
            return LocalDateTime.of_date_time(parsed.date, parsed.time)
        if parsed.date is not None:
            return parsed.date
        if parsed.time is not None:
            return parsed.time
        raise ParseError(
            f"text {text!r} has no date or time fields for pattern {self._pattern!r}"
        )

    def parse_local_date(self, text: str) -> LocalDate:
        """Parse text and return its date.

        Raises:
            ParseError: If the text has no complete date.
        """
        parsed = self._parse(text)
        if parsed.date is None:
            raise ParseError(
                f"text {text!r} has no date for pattern {self._pattern!r}"
            )
        return parsed.date

    def parse_local_time(self, text: str) -> LocalTime:
        """Parse text and return its time of day.

        Raises:
            ParseError: If the text has no time of day.

        Examples:
            >>> fmt = DateTimeFormatter.of_pattern("HH:mm")
            >>> fmt.parse_local_time("10:30")
            LocalTime(10, 30, 0, nanosecond=0)
        """
        parsed = self._parse(text)
        if parsed.time is None:
            raise ParseError(
                f"text {text!r} has no time for pattern {self._pattern!r}"
            )
        return parsed.time

    def parse_local_date_time(self, text: str) -> LocalDateTime:
        """Parse text and return a LocalDateTime.

        Raises:
            ParseError: If the text lacks either the date or the time.
        """
        parsed = self._parse(text)
        if parsed.date is None or parsed.time is None:
            raise ParseError(
                f"text {text!r} has no date-time for pattern {self._pattern!r}"
            )
        return LocalDateTime.of_date_time(parsed.date, parsed.time)

    def _parse(self, text: str) -> _Parsed:
        try:
            return self._read(text)
        except (ParseError, ValidationError) as e:
            raise ParseError(
                f"text {text!r} could not be parsed with pattern {self._pattern!r}: {e}"
            ) from e

    def _read(self, text: str) -> _Parsed:
        match = self._regex.fullmatch(text)
        if not match:
            raise ParseError("text does not match")

        values: dict[str, int] = {}
        for name, raw in match.groupdict().items():
            letter, value = _read_field(self._groups[name], raw)
            if letter in values and values[letter] != value:
                raise ParseError(f"conflicting values for {letter!r}")
            values[letter] = value

        return _Parsed(_resolve_date(values), _resolve_time(values))

    # Special methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeFormatter):
            return NotImplemented
        return type(self) is type(other) and self._pattern == other._pattern

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((type(self), self._pattern))

    def __repr__(self) -> str:
        return f"DateTimeFormatter.of_pattern({self._pattern!r})"

    def __str__(self) -> str:
        return self._pattern


def _format_field(value: TemporalType, field: _Field) -> str:
    letter, count = field
    if letter in "yu":
        year = value.get(ChronoField.YEAR)
        if count == 2:
            return f"{year % 100:02d}"
        return _pad(year, count)
    if letter == "M":
        month = value.get(ChronoField.MONTH_OF_YEAR)
        if count == 3:
            return Month(month).short_name
        if count == 4:
            return Month(month).display_name
        return _pad(month, count)
    if letter == "d":
        return _pad(value.get(ChronoField.DAY_OF_MONTH), count)
    if letter == "D":
        return _pad(value.get(ChronoField.DAY_OF_YEAR), count)
    if letter == "E":
        day = DayOfWeek(value.get(ChronoField.DAY_OF_WEEK))
        return day.display_name if count == 4 else day.short_name
    if letter == "a":
        return "PM" if value.get(ChronoField.AMPM_OF_DAY) else "AM"
    if letter == "H":
        return _pad(value.get(ChronoField.HOUR_OF_DAY), count)
    if letter == "h":
        return _pad(value.get(ChronoField.CLOCK_HOUR_OF_AMPM), count)
    if letter == "m":
        return _pad(value.get(ChronoField.MINUTE_OF_HOUR), count)
    if letter == "s":
        return _pad(value.get(ChronoField.SECOND_OF_MINUTE), count)
    # S: leading digits of the nanosecond, truncated
    nano = value.get(ChronoField.NANO_OF_SECOND)
    return f"{nano:09d}"[:count]


def _read_field(field: _Field, raw: str) -> tuple[str, int]:
    """Convert matched text to (letter, value), merging y and u."""
    letter, count = field
    if letter in "yu":
        if count == 2:
            return "y", _TWO_DIGIT_YEAR_BASE + int(raw)
        return "y", int(raw)
    if letter == "M" and count >= 3:
        return "M", (_MONTH_SHORT if count == 3 else _MONTH_FULL)[raw]
    if letter == "E":
        return "E", (_DAY_FULL if count == 4 else _DAY_SHORT)[raw]
    if letter == "a":
        return "a", 1 if raw == "PM" else 0
    if letter == "S":
        return "S", int(raw.ljust(9, "0"))
    return letter, int(raw)


def _resolve_date(values: dict[str, int]) -> LocalDate | None:
    has_date_fields = any(k in values for k in "yMdDE")
    if not has_date_fields:
        return None
    if "y" not in values:
        raise ParseError("a date needs a year")

    year = values["y"]
    if "M" in values and "d" in values:
        date = LocalDate(year, values["M"], values["d"])
        if "D" in values and date.day_of_year != values["D"]:
            raise ParseError(
                f"day-of-year {values['D']} does not match {date.to_iso_format()}"
            )
    elif "D" in values:
        date = LocalDate.of_year_day(year, values["D"])
        if ("M" in values and date.month_value != values["M"]) or (
            "d" in values and date.day_of_month != values["d"]
        ):
            raise ParseError(
                f"day-of-year {values['D']} does not match the month and day"
            )
    else:
        raise ParseError("a date needs a month and day, or a day-of-year")

    if "E" in values and date.day_of_week.value != values["E"]:
        raise ParseError(
            f"{date.to_iso_format()} is a {date.day_of_week.display_name}, "
            f"not a {DayOfWeek(values['E']).display_name}"
        )
    return date


def _resolve_time(values: dict[str, int]) -> LocalTime | None:
    has_time_fields = any(k in values for k in "aHhmsS")
    if not has_time_fields:
        return None

    if "H" in values:
        hour = values["H"]
        if "a" in values and hour // 12 != values["a"]:
            raise ParseError(f"hour {hour} does not match the AM/PM marker")
        if "h" in values and (hour % 12 or 12) != values["h"]:
            raise ParseError(f"hour {hour} does not match clock hour {values['h']}")
    elif "h" in values:
        if "a" not in values:
            raise ParseError("a clock hour (h) needs an AM/PM marker (a)")
        clock_hour = values["h"]
        if not 1 <= clock_hour <= 12:
            raise ParseError(f"clock hour must be between 1 and 12, got {clock_hour}")
        hour = clock_hour % 12 + 12 * values["a"]
    else:
        raise ParseError("a time needs an hour")

    return LocalTime(
        hour,
        values.get("m", 0),
        values.get("s", 0),
        values.get("S", 0),
    )


class _IsoFormatter(DateTimeFormatter):
    """A formatter that reads and writes ISO 8601 text.

    Output matches the values' own to_iso_format(), so seconds and
    fractions are left out when they are zero. The declared pattern marks
    those optional parts with square brackets, as in ``HH:mm[:ss[.S]]``.
    """

    __slots__ = ("_name",)

    def __init__(self, pattern: str, name: str) -> None:
        super().__init__(pattern)
        self._name = name

    def format(self, value: TemporalType) -> str:
        if self._name == "ISO_LOCAL_DATE":
            return _date_part(value).to_iso_format()
        if self._name == "ISO_LOCAL_TIME":
            return _time_part(value).to_iso_format()
        return LocalDateTime.of_date_time(
            _date_part(value), _time_part(value)
        ).to_iso_format()

    def _read(self, text: str) -> _Parsed:
        if self._name == "ISO_LOCAL_DATE":
            return _Parsed(LocalDate.parse(text), None)
        if self._name == "ISO_LOCAL_TIME":
            return _Parsed(None, LocalTime.parse(text))
        value = LocalDateTime.parse(text)
        return _Parsed(value.to_local_date(), value.to_local_time())

    def __repr__(self) -> str:
        return f"DateTimeFormatter.{self._name}"


def _date_part(value: TemporalType) -> LocalDate:
    if isinstance(value, LocalDateTime):
        return value.to_local_date()
    if isinstance(value, LocalDate):
        return value
    if isinstance(value, LocalTime):
        raise UnsupportedFieldError("a LocalTime has no date fields")
    raise TypeError(f"expected a local date type, got {type(value).__name__}")


def _time_part(value: TemporalType) -> LocalTime:
    if isinstance(value, LocalDateTime):
        return value.to_local_time()
    if isinstance(value, LocalTime):
        return value
    if isinstance(value, LocalDate):
        raise UnsupportedFieldError("a LocalDate has no time fields")
    raise TypeError(f"expected a local time type, got {type(value).__name__}")


DateTimeFormatter.ISO_LOCAL_DATE = _IsoFormatter("uuuu-MM-dd", "ISO_LOCAL_DATE")
DateTimeFormatter.ISO_LOCAL_TIME = _IsoFormatter(
    "HH:mm[:ss[.SSSSSSSSS]]", "ISO_LOCAL_TIME"
)
DateTimeFormatter.ISO_LOCAL_DATE_TIME = _IsoFormatter(
    "uuuu-MM-dd'T'HH:mm[:ss[.SSSSSSSSS]]", "ISO_LOCAL_DATE_TIME"
)


__all__ = ["DateTimeFormatter"]
