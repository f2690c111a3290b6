"""Timestamps in the HTTP date formats."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .core import HeaderError, just_one

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MAX_TIMESTAMP = 253402300799  # 9999-12-31 23:59:59 UTC

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_Fields = tuple[int, int, int, int, int, int, int]


def _number(text: str) -> int:
    if not text or any(c not in "0123456789" for c in text):
        raise ValueError(text)
    return int(text)


def _expect(text: str, index: int, literal: str) -> None:
    if text[index:index + len(literal)] != literal:
        raise ValueError(text)


def _parse_imf(s: str) -> _Fields:
    # Sun, 06 Nov 1994 08:49:37 GMT
    if len(s) != 29:
        raise ValueError(s)
    for index, literal in ((3, ", "), (7, " "), (11, " "), (16, " "), (19, ":"), (22, ":"), (25, " GMT")):
        _expect(s, index, literal)
    return (
        _number(s[12:16]),
        _MONTHS.index(s[8:11]) + 1,
        _number(s[5:7]),
        _number(s[17:19]),
        _number(s[20:22]),
        _number(s[23:25]),
        _WEEKDAYS.index(s[:3]),
    )


def _parse_rfc850(s: str) -> _Fields:
    # Sunday, 06-Nov-94 08:49:37 GMT
    comma = s.find(",")
    if comma < 0:
        raise ValueError(s)
    weekday = _WEEKDAY_NAMES.index(s[:comma])
    rest = s[comma:]
    if len(rest) != 24:
        raise ValueError(s)
    for index, literal in ((0, ", "), (4, "-"), (8, "-"), (11, " "), (14, ":"), (17, ":"), (20, " GMT")):
        _expect(rest, index, literal)
    short_year = _number(rest[9:11])
    year = short_year + (2000 if short_year < 70 else 1900)
    return (
        year,
        _MONTHS.index(rest[5:8]) + 1,
        _number(rest[2:4]),
        _number(rest[12:14]),
        _number(rest[15:17]),
        _number(rest[18:20]),
        weekday,
    )


def _parse_asctime(s: str) -> _Fields:
    # Sun Nov  6 08:49:37 1994
    if len(s) != 24:
        raise ValueError(s)
    for index, literal in ((3, " "), (7, " "), (10, " "), (13, ":"), (16, ":"), (19, " ")):
        _expect(s, index, literal)
    day = _number(s[9]) if s[8] == " " else _number(s[8:10])
    return (
        _number(s[20:24]),
        _MONTHS.index(s[4:7]) + 1,
        day,
        _number(s[11:13]),
        _number(s[14:16]),
        _number(s[17:19]),
        _WEEKDAYS.index(s[:3]),
    )


def parse_http_date(text: str) -> int:
    """Parse an IMF-fixdate, RFC 850 or asctime date into a Unix timestamp.

    Raises ValueError if ``text`` is not a valid HTTP date.
    """
    if not isinstance(text, str) or not text.isascii():
        raise ValueError(f"invalid HTTP date: {text!r}")
    for parser in (_parse_imf, _parse_rfc850, _parse_asctime):
        try:
            year, month, day, hour, minute, second, weekday = parser(text)
        except ValueError:
            continue
        break
    else:
        raise ValueError(f"invalid HTTP date: {text!r}")
    if not 1970 <= year <= 9999:
        raise ValueError(f"HTTP date out of range: {text!r}")
    try:
        moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as exc:
        raise ValueError(f"invalid HTTP date: {text!r}") from exc
    if moment.weekday() != weekday:
        raise ValueError(f"wrong weekday in HTTP date: {text!r}")
    return int((moment - _EPOCH).total_seconds())


def format_http_date(timestamp: int) -> str:
    """Format a Unix timestamp as an IMF-fixdate."""
    if not 0 <= timestamp <= _MAX_TIMESTAMP:
        raise ValueError(f"timestamp out of range: {timestamp}")
    moment = _EPOCH + timedelta(seconds=timestamp)
    return (
        f"{_WEEKDAYS[moment.weekday()]}, {moment.day:02d} {_MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} GMT"
    )


@dataclass(frozen=True, order=True)
class HttpDate:
    """A whole-second UTC timestamp between 1970 and 9999 with HTTP formatting."""

    timestamp: int

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise TypeError("timestamp must be an int")
        if not 0 <= self.timestamp <= _MAX_TIMESTAMP:
            raise ValueError(f"timestamp out of range: {self.timestamp}")

    @classmethod
    def parse(cls, text: str) -> HttpDate:
        """Parse any of the three HTTP date formats; raise ValueError on failure."""
        return cls(parse_http_date(text))

    @classmethod
    def from_datetime(cls, dt: datetime) -> HttpDate:
        """Build from a datetime, dropping fractions of a second; naive means UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(math.floor((dt - _EPOCH).total_seconds()))

    def to_datetime(self) -> datetime:
        """The timestamp as an aware UTC datetime."""
        return _EPOCH + timedelta(seconds=self.timestamp)

    @classmethod
    def try_from_values(cls, values: Iterable[str]) -> HttpDate:
        """Decode exactly one raw value as a date; raise HeaderError otherwise."""
        one = just_one(values)
        if not isinstance(one, str):
            raise HeaderError()
        try:
            return cls.parse(one)
        except ValueError as exc:
            raise HeaderError() from exc

    def __str__(self) -> str:
        return format_http_date(self.timestamp)