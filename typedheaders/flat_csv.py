"""Header values that hold separated lists, and comma-delimited helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from .core import HeaderError, is_visible_ascii, to_header_value

T = TypeVar("T")


@dataclass(frozen=True)
class FlatCsv:
    """A single header value that may hold several items split by ``separator``.

    Separators inside double quotes do not split.
    """

    value: str
    separator: str = ","

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError("separator must be a single character")

    @classmethod
    def from_values(cls, values: Iterable[object], separator: str = ",") -> FlatCsv:
        """Merge several raw values into one, joined by the separator and a space."""
        parts = [to_header_value(value) for value in values]
        return cls(f"{separator} ".join(parts), separator)

    def __iter__(self) -> Iterator[str]:
        """Yield the trimmed items; nothing if the value is not visible ASCII."""
        if not is_visible_ascii(self.value):
            return
        in_quotes = False
        item: list[str] = []
        for ch in self.value:
            if in_quotes:
                if ch == '"':
                    in_quotes = False
            elif ch == self.separator:
                yield "".join(item).strip()
                item = []
                continue
            elif ch == '"':
                in_quotes = True
            item.append(ch)
        yield "".join(item).strip()


def from_comma_delimited(
    values: Iterable[str | bytes], parse: Callable[[str], T] = str  # type: ignore[assignment]
) -> list[T]:
    """Parse every non-empty comma-separated item of ``values`` with ``parse``.

    Values that are not visible ASCII are skipped. Raises HeaderError if an
    item fails to parse.
    """
    result: list[T] = []
    for value in values:
        if not is_visible_ascii(value):
            continue
        text = value.decode("ascii") if isinstance(value, (bytes, bytearray)) else value
        for part in text.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                result.append(parse(part))
            except (ValueError, TypeError) as exc:
                raise HeaderError() from exc
    return result


def fmt_comma_delimited(items: Iterable[object]) -> str:
    """Join the string forms of ``items`` with a comma and a space."""
    return ", ".join(str(item) for item in items)