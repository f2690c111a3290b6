"""Typed implementations of common HTTP headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar

from .core import Header, HeaderError, is_visible_ascii, just_one, to_header_value
from .flat_csv import FlatCsv
from .seconds import Seconds
from .value_string import HeaderValueString


def _flat_csv(values: Iterable[str]) -> FlatCsv:
    try:
        return FlatCsv.from_values(values)
    except ValueError as exc:
        raise HeaderError() from exc


def _as_csv(csv: FlatCsv | str) -> FlatCsv:
    return csv if isinstance(csv, FlatCsv) else FlatCsv(to_header_value(csv))


@dataclass(frozen=True)
class SetCookie(Header):
    """The ``Set-Cookie`` header: one raw cookie string per value."""

    name: ClassVar[str] = "set-cookie"

    values: tuple[str, ...]

    def __init__(self, values: Iterable[object]) -> None:
        object.__setattr__(self, "values", tuple(to_header_value(v) for v in values))

    @classmethod
    def decode(cls, values: Iterable[str]) -> SetCookie:
        """Collect every value; raise HeaderError if there are none."""
        collected = list(values)
        if not collected:
            raise HeaderError()
        try:
            return cls(collected)
        except ValueError as exc:
            raise HeaderError() from exc

    def encode(self) -> list[str]:
        return list(self.values)


@dataclass(frozen=True)
class StrictTransportSecurity(Header):
    """The ``Strict-Transport-Security`` header (HSTS policy)."""

    name: ClassVar[str] = "strict-transport-security"

    max_age: timedelta
    include_subdomains: bool

    def __post_init__(self) -> None:
        age = self.max_age
        if isinstance(age, Seconds):
            age = age.to_timedelta()
        elif isinstance(age, int) and not isinstance(age, bool):
            age = timedelta(seconds=age)
        if not isinstance(age, timedelta):
            raise TypeError("max_age must be a timedelta or an int")
        # Validates that the duration is a whole, non-negative number of seconds.
        Seconds.from_timedelta(age)
        object.__setattr__(self, "max_age", age)
        object.__setattr__(self, "include_subdomains", bool(self.include_subdomains))

    @classmethod
    def including_subdomains(cls, max_age: timedelta | int) -> StrictTransportSecurity:
        """A policy that also covers subdomains."""
        return cls(max_age, True)

    @classmethod
    def excluding_subdomains(cls, max_age: timedelta | int) -> StrictTransportSecurity:
        """A policy that does not cover subdomains."""
        return cls(max_age, False)

    @classmethod
    def parse(cls, text: str) -> StrictTransportSecurity:
        """Parse the directive list; raise HeaderError if it is not a valid policy."""
        age: Seconds | None = None
        include = False
        for directive in text.split(";"):
            directive = directive.strip()
            if directive.lower() == "includesubdomains":
                if include:
                    raise HeaderError()
                include = True
                continue
            left, sep, right = directive.partition("=")
            if not sep or left.strip().lower() != "max-age":
                continue
            parsed = Seconds.from_value(right.strip().strip('"'))
            if parsed is None or age is not None:
                raise HeaderError()
            age = parsed
        if age is None:
            raise HeaderError()
        try:
            return cls(age.to_timedelta(), include)
        except (OverflowError, ValueError) as exc:
            raise HeaderError() from exc

    @classmethod
    def decode(cls, values: Iterable[str]) -> StrictTransportSecurity:
        one = just_one(values)
        if one is None or not is_visible_ascii(one):
            raise HeaderError()
        return cls.parse(one)

    def encode(self) -> list[str]:
        secs = Seconds.from_timedelta(self.max_age)
        if self.include_subdomains:
            return [f"max-age={secs}; includeSubdomains"]
        return [f"max-age={secs}"]


@dataclass(frozen=True)
class Te(Header):
    """The ``TE`` header: transfer codings the client accepts."""

    name: ClassVar[str] = "te"

    csv: FlatCsv

    def __post_init__(self) -> None:
        object.__setattr__(self, "csv", _as_csv(self.csv))

    @classmethod
    def trailers(cls) -> Te:
        """``TE: trailers``."""
        return cls(FlatCsv("trailers"))

    @classmethod
    def decode(cls, values: Iterable[str]) -> Te:
        return cls(_flat_csv(values))

    def encode(self) -> list[str]:
        return [self.csv.value]


@dataclass(frozen=True)
class TransferEncoding(Header):
    """The ``Transfer-Encoding`` header."""

    name: ClassVar[str] = "transfer-encoding"

    csv: FlatCsv

    def __post_init__(self) -> None:
        object.__setattr__(self, "csv", _as_csv(self.csv))

    @classmethod
    def chunked(cls) -> TransferEncoding:
        """``Transfer-Encoding: chunked``."""
        return cls(FlatCsv("chunked"))

    def is_chunked(self) -> bool:
        """Whether the last coding listed is ``chunked``."""
        value = self.csv.value
        if not is_visible_ascii(value):
            return False
        return value.split(",")[-1].strip() == "chunked"

    @classmethod
    def decode(cls, values: Iterable[str]) -> TransferEncoding:
        return cls(_flat_csv(values))

    def encode(self) -> list[str]:
        return [self.csv.value]


@dataclass(frozen=True)
class Upgrade(Header):
    """The ``Upgrade`` header."""

    name: ClassVar[str] = "upgrade"

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_header_value(self.value))

    @classmethod
    def websocket(cls) -> Upgrade:
        """``Upgrade: websocket``."""
        return cls("websocket")

    @classmethod
    def decode(cls, values: Iterable[str]) -> Upgrade:
        """Take the first value; raise HeaderError if there is none."""
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        try:
            return cls(first)
        except ValueError as exc:
            raise HeaderError() from exc

    def encode(self) -> list[str]:
        return [self.value]


class InvalidUserAgent(ValueError):
    """Raised when a string is not a legal ``User-Agent`` value."""

    def __init__(self, message: str = "InvalidUserAgent") -> None:
        super().__init__(message)


@dataclass(frozen=True, order=True)
class UserAgent(Header):
    """The ``User-Agent`` header; the value is kept unsplit."""

    name: ClassVar[str] = "user-agent"

    value: HeaderValueString = field()

    def __post_init__(self) -> None:
        if not isinstance(self.value, HeaderValueString):
            object.__setattr__(self, "value", HeaderValueString(self.value))

    @classmethod
    def parse(cls, text: str) -> UserAgent:
        """Build from a string; raise InvalidUserAgent if it is not a legal value."""
        try:
            return cls(HeaderValueString(text))
        except ValueError as exc:
            raise InvalidUserAgent() from exc

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def decode(cls, values: Iterable[str]) -> UserAgent:
        return cls(HeaderValueString.try_from_values(values))

    def encode(self) -> list[str]:
        return [self.value.value]


@dataclass(frozen=True)
class Vary(Header):
    """The ``Vary`` header: ``*`` or a list of header names."""

    name: ClassVar[str] = "vary"

    csv: FlatCsv

    def __post_init__(self) -> None:
        object.__setattr__(self, "csv", _as_csv(self.csv))

    @classmethod
    def any(cls) -> Vary:
        """``Vary: *``."""
        return cls(FlatCsv("*"))

    def is_any(self) -> bool:
        """Whether the list includes ``*``."""
        return "*" in self.csv

    def iter_strs(self) -> Iterator[str]:
        """The header names listed."""
        return iter(self.csv)

    @classmethod
    def decode(cls, values: Iterable[str]) -> Vary:
        return cls(_flat_csv(values))

    def encode(self) -> list[str]:
        return [self.csv.value]