"""A whole number of seconds carried in a header value."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta

from .core import HeaderError, is_visible_ascii, just_one

_MAX_SECONDS = 2**64 - 1


@dataclass(frozen=True, order=True)
class Seconds:
    """A non-negative whole number of seconds."""

    secs: int

    def __post_init__(self) -> None:
        if isinstance(self.secs, bool) or not isinstance(self.secs, int):
            raise TypeError("secs must be an int")
        if not 0 <= self.secs <= _MAX_SECONDS:
            raise ValueError(f"seconds out of range: {self.secs}")

    @classmethod
    def from_value(cls, value: str | bytes) -> Seconds | None:
        """Parse a decimal header value; None if it is not a valid count."""
        if not is_visible_ascii(value):
            return None
        text = bytes(value).decode("ascii") if isinstance(value, (bytes, bytearray)) else value
        digits = text[1:] if text.startswith("+") else text
        if not digits or any(c not in "0123456789" for c in digits):
            return None
        secs = int(digits)
        if secs > _MAX_SECONDS:
            return None
        return cls(secs)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Seconds:
        """Build from a timedelta holding a whole number of seconds."""
        if delta.microseconds:
            raise ValueError("duration must be a whole number of seconds")
        return cls(delta.days * 86400 + delta.seconds)

    def to_timedelta(self) -> timedelta:
        """The seconds as a timedelta."""
        return timedelta(seconds=self.secs)

    @classmethod
    def try_from_values(cls, values: Iterable[str]) -> Seconds:
        """Decode exactly one raw value; raise HeaderError otherwise."""
        one = just_one(values)
        result = cls.from_value(one) if one is not None else None
        if result is None:
            raise HeaderError()
        return result

    def __int__(self) -> int:
        return self.secs

    def __str__(self) -> str:
        return str(self.secs)