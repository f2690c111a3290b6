"""A case-insensitive, multi-valued map of HTTP headers with typed access."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping
from typing import TypeVar

from .core import Header, HeaderError, to_header_value

H = TypeVar("H", bound=Header)

_TOKEN_CHARS = frozenset("!#$%&'*+-.^_`|~" + string.ascii_letters + string.digits)


def _normalize_name(name: str) -> str:
    if not name or not set(name) <= _TOKEN_CHARS:
        raise ValueError(f"invalid header name: {name!r}")
    return name.lower()


class HeaderMap:
    """Header fields keyed by case-insensitive name, each holding one or more values."""

    def __init__(
        self,
        items: Mapping[str, object] | Iterable[tuple[str, object]] | None = None,
    ) -> None:
        self._entries: dict[str, list[str]] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for name, value in pairs:
                self.append(name, value)

    def append(self, name: str, value: object) -> None:
        """Add ``value`` after any values already stored under ``name``."""
        key = _normalize_name(name)
        text = to_header_value(value)
        self._entries.setdefault(key, []).append(text)

    def insert(self, name: str, value: object) -> list[str]:
        """Replace every value under ``name`` with ``value``; return the old values."""
        key = _normalize_name(name)
        text = to_header_value(value)
        previous = self._entries.get(key, [])
        self._entries[key] = [text]
        return previous

    def get(self, name: str) -> str | None:
        """Return the first value under ``name``, or None."""
        values = self._entries.get(name.lower())
        return values[0] if values else None

    def get_all(self, name: str) -> list[str]:
        """Return every value under ``name``, in insertion order."""
        return list(self._entries.get(name.lower(), ()))

    def remove(self, name: str) -> list[str]:
        """Remove ``name`` and return the values it held."""
        return self._entries.pop(name.lower(), [])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __len__(self) -> int:
        return sum(len(values) for values in self._entries.values())

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for name, values in self._entries.items():
            for value in values:
                yield name, value

    def __repr__(self) -> str:
        return f"HeaderMap({list(self)!r})"

    def typed_insert(self, header: Header) -> None:
        """Store a typed header, replacing any values under its name.

        A header that encodes to no values leaves the map untouched.
        """
        key = _normalize_name(header.name)
        values = [to_header_value(value) for value in header.encode()]
        if values:
            self._entries[key] = values

    def typed_get(self, header_cls: type[H]) -> H | None:
        """Decode ``header_cls`` from the map; None if absent or invalid."""
        try:
            return self.typed_try_get(header_cls)
        except HeaderError:
            return None

    def typed_try_get(self, header_cls: type[H]) -> H | None:
        """Decode ``header_cls`` from the map; None if absent.

        Raises HeaderError if values are present but invalid.
        """
        values = self._entries.get(header_cls.name.lower())
        if not values:
            return None
        return header_cls.decode(iter(list(values)))