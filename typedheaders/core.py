"""The typed header protocol and helpers shared by header implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound="Header")


class HeaderError(ValueError):
    """Raised when raw header values cannot be decoded into a typed header."""

    def __init__(self, message: str = "invalid HTTP header") -> None:
        super().__init__(message)


class Header(ABC):
    """A strongly typed HTTP header.

    Subclasses set ``name`` to the header's field name and implement
    ``decode`` and ``encode``.
    """

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def decode(cls: type[H], values: Iterable[str]) -> H:
        """Build the header from the raw values stored under ``name``.

        Raises HeaderError when the values do not form a valid header.
        """

    @abstractmethod
    def encode(self) -> list[str]:
        """Return the raw values that represent this header, in order."""


def just_one(values: Iterable[T]) -> T | None:
    """Return the only item of ``values``, or None if there are zero or several."""
    iterator = iter(values)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return None
    if next(iterator, _MISSING) is not _MISSING:
        return None
    return first  # type: ignore[return-value]


_MISSING = object()


def _code_points(value: str | bytes) -> Iterable[int]:
    if isinstance(value, (bytes, bytearray)):
        return value
    return map(ord, value)


def is_valid_value(value: str | bytes) -> bool:
    """Whether ``value`` may be used as a header value (no control characters)."""
    return all(c == 0x09 or (c >= 0x20 and c != 0x7F) for c in _code_points(value))


def is_visible_ascii(value: str | bytes) -> bool:
    """Whether ``value`` holds only visible ASCII characters, spaces and tabs."""
    return all(c == 0x09 or 0x20 <= c < 0x7F for c in _code_points(value))


def to_header_value(obj: object) -> str:
    """Render ``obj`` as a header value.

    Bytes are read as Latin-1; anything other than a string is formatted
    with ``str``. Raises ValueError if the result is not a legal header value.
    """
    if isinstance(obj, (bytes, bytearray)):
        text = bytes(obj).decode("latin-1")
    elif isinstance(obj, str):
        text = obj
    else:
        text = str(obj)
    if not is_valid_value(text):
        raise ValueError(f"illegal header value: {text!r}")
    return text