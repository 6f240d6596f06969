"""Calendar dates parsed from heterogeneous vendor data.

Vendors publish launch dates in three shapes, tried in this order:

1. ``"August 7, 2019"``: long form.
2. ``"6/13/2023"``: US slash form, month first.
3. ``"Q1'20"`` / ``"Q4'2024"``: quarter form; each quarter maps to
   a fixed mid-quarter day.

Once text has the slash or quarter shape, errors inside that shape are
final; the parser never falls through to the next format.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from datetime import date as _date

from hardwaredb.constants import (
    LONG_DATE_FORMAT,
    MAX_YEAR,
    MIN_YEAR,
    QUARTER_MID_DAYS,
    TWO_DIGIT_YEAR_BASE,
)
from hardwaredb.errors import DateParseError, DateRangeError
from hardwaredb.values.uncertain import (
    Present,
    PresentWithDoubt,
    UncertainValue,
)

_UNSIGNED = re.compile(r"[0-9]+")


@dataclass(frozen=True, order=True)
class Date:
    """A range-checked calendar date."""

    _value: _date

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        """Build a date, rejecting out-of-range fields.

        Raises ``DateRangeError`` naming the offending field.
        """
        if year < MIN_YEAR:
            raise DateRangeError("year", year, f"year {year} too small")
        if year > MAX_YEAR:
            raise DateRangeError("year", year, f"year {year} too large")
        if not 1 <= month <= 12:
            raise DateRangeError(
                "month", month, f"month {month} out of range 1..12"
            )
        last_day = calendar.monthrange(year, month)[1]
        if not 1 <= day <= last_day:
            raise DateRangeError(
                "day", day, f"invalid day {day} for {year}/{month}"
            )
        return cls(_date(year, month, day))

    @classmethod
    def parse(cls, text: str) -> Date:
        return parse_date(text)

    @classmethod
    def parse_value(
        cls, text: str, doubt: str | None = None
    ) -> UncertainValue[Date]:
        """Parse ``text`` straight into a catalog field.

        With ``doubt`` the result is ``PresentWithDoubt`` carrying that
        note, otherwise ``Present``.
        """
        parsed = parse_date(text)
        if doubt is None:
            return Present(parsed)
        return PresentWithDoubt(parsed, doubt)

    @property
    def year(self) -> int:
        return self._value.year

    @property
    def month(self) -> int:
        return self._value.month

    @property
    def day(self) -> int:
        return self._value.day

    def unix_seconds(self) -> int:
        """Seconds since the epoch at midnight UTC of this date."""
        midnight = datetime(
            self.year, self.month, self.day, tzinfo=UTC
        )
        return int(midnight.timestamp())

    def __str__(self) -> str:
        return self._value.isoformat()


def parse_date(text: str) -> Date:
    """Parse a vendor date string.

    Raises ``DateParseError`` carrying ``text``; ``field`` is set when
    a recognized shape had a bad component.
    """
    long_form = _parse_long_form(text)
    if long_form is not None:
        return long_form

    if text.count("/") == 2:
        return _parse_slash_form(text)
    if text.count("'") == 1:
        return _parse_quarter_form(text)
    raise DateParseError(
        text,
        "unrecognized date format; expected \"August 7, 2019\", "
        "\"6/13/2023\" or \"Q1'20\"",
    )


def _parse_long_form(text: str) -> Date | None:
    try:
        parsed = datetime.strptime(text, LONG_DATE_FORMAT)
    except ValueError:
        return None
    return _checked(text, parsed.year, parsed.month, parsed.day)


def _parse_slash_form(text: str) -> Date:
    month, day, year = text.split("/")
    return _checked(
        text,
        _unsigned(text, "year", year),
        _unsigned(text, "month", month),
        _unsigned(text, "day", day),
    )


def _parse_quarter_form(text: str) -> Date:
    quarter, year_text = text.split("'")
    if not _UNSIGNED.fullmatch(year_text) or len(year_text) not in (2, 4):
        raise DateParseError(
            text,
            "2 or 4 digits representing the year expected after \"'\"",
            field="year",
        )
    year = int(year_text)
    if len(year_text) == 2:
        year += TWO_DIGIT_YEAR_BASE
    if quarter not in QUARTER_MID_DAYS:
        raise DateParseError(
            text, "expecting Q1, Q2, Q3 or Q4 before \"'\"", field="quarter"
        )
    month, day = QUARTER_MID_DAYS[quarter]
    return _checked(text, year, month, day)


def _unsigned(text: str, field: str, component: str) -> int:
    if not _UNSIGNED.fullmatch(component):
        raise DateParseError(
            text, f"{field} {component!r} is not a number", field=field
        )
    return int(component)


def _checked(text: str, year: int, month: int, day: int) -> Date:
    try:
        return Date.from_ymd(year, month, day)
    except DateRangeError as exc:
        raise DateParseError(text, exc.reason, field=exc.field) from exc
