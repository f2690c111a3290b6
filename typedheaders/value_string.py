"""Header values that are also plain strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .core import HeaderError, is_valid_value, is_visible_ascii, just_one


@dataclass(frozen=True, order=True)
class HeaderValueString:
    """A string that is a legal header value."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_valid_value(self.value):
            raise ValueError(f"illegal header value: {self.value!r}")

    @classmethod
    def from_value(cls, value: str | bytes) -> HeaderValueString:
        """Accept a raw value made only of visible ASCII; raise HeaderError otherwise."""
        if not is_visible_ascii(value):
            raise HeaderError()
        text = bytes(value).decode("ascii") if isinstance(value, (bytes, bytearray)) else value
        return cls(text)

    @classmethod
    def try_from_values(cls, values: Iterable[str]) -> HeaderValueString:
        """Decode exactly one raw value; raise HeaderError otherwise."""
        one = just_one(values)
        if one is None:
            raise HeaderError()
        return cls.from_value(one)

    def __str__(self) -> str:
        return self.value