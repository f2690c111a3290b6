"""Entity tags and entity-tag ranges used by conditional request headers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .core import HeaderError, is_valid_value, just_one
from .flat_csv import FlatCsv


def _is_entity_tag(text: str) -> bool:
    if not is_valid_value(text):
        return False
    length = len(text)
    if length < 2 or text[-1] != '"':
        return False
    if text[0] == '"':
        start = 1
    elif text[0] == "W":
        if length >= 4 and text[1] == "/" and text[2] == '"':
            start = 3
        else:
            return False
    else:
        return False
    return '"' not in text[start:-1]


@dataclass(frozen=True)
class EntityTag:
    """An entity tag such as ``"xyzzy"`` or ``W/"xyzzy"``.

    Use ``strong_eq`` or ``weak_eq`` for the comparisons the HTTP rules
    define; ``==`` only checks that two tags are identical.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _is_entity_tag(self.value):
            raise ValueError(f"invalid entity tag: {self.value!r}")

    @classmethod
    def parse(cls, src: str | bytes) -> EntityTag | None:
        """Return the entity tag in ``src``, or None if it is not one."""
        text = bytes(src).decode("latin-1") if isinstance(src, (bytes, bytearray)) else src
        if not isinstance(text, str) or not _is_entity_tag(text):
            return None
        return cls(text)

    def tag(self) -> str:
        """The opaque tag, without quotes or weakness prefix."""
        return self.value[3:-1] if self.is_weak() else self.value[1:-1]

    def is_weak(self) -> bool:
        """Whether this is a weak tag."""
        return self.value[0] == "W"

    def strong_eq(self, other: EntityTag) -> bool:
        """Both tags are strong and their opaque tags match exactly."""
        return not self.is_weak() and not other.is_weak() and self.tag() == other.tag()

    def weak_eq(self, other: EntityTag) -> bool:
        """The opaque tags match, whether or not either is weak."""
        return self.tag() == other.tag()

    def strong_ne(self, other: EntityTag) -> bool:
        """The inverse of ``strong_eq``."""
        return not self.strong_eq(other)

    def weak_ne(self, other: EntityTag) -> bool:
        """The inverse of ``weak_eq``."""
        return not self.weak_eq(other)

    @classmethod
    def try_from_values(cls, values: Iterable[str]) -> EntityTag:
        """Decode exactly one raw value as an entity tag; raise HeaderError otherwise."""
        one = just_one(values)
        tag = cls.parse(one) if one is not None else None
        if tag is None:
            raise HeaderError()
        return tag

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EntityTagRange:
    """Either ``*`` (any tag) or a list of entity tags; ``tags`` is None for ``*``."""

    tags: FlatCsv | None = None

    @classmethod
    def any(cls) -> EntityTagRange:
        """The range that matches every entity tag."""
        return cls(None)

    def is_any(self) -> bool:
        """Whether this range is ``*``."""
        return self.tags is None

    def matches_strong(self, entity: EntityTag) -> bool:
        """Whether any tag in the range strongly matches ``entity``."""
        return self._matches_if(entity, EntityTag.strong_eq)

    def matches_weak(self, entity: EntityTag) -> bool:
        """Whether any tag in the range weakly matches ``entity``."""
        return self._matches_if(entity, EntityTag.weak_eq)

    def _matches_if(
        self, entity: EntityTag, func: Callable[[EntityTag, EntityTag], bool]
    ) -> bool:
        if self.tags is None:
            return True
        for item in self.tags:
            tag = EntityTag.parse(item)
            if tag is not None and func(tag, entity):
                return True
        return False

    @classmethod
    def try_from_values(cls, values: Iterable[str]) -> EntityTagRange:
        """Merge the raw values into a range; ``*`` becomes the any-range."""
        try:
            flat = FlatCsv.from_values(values)
        except ValueError as exc:
            raise HeaderError() from exc
        if flat.value == "*":
            return cls.any()
        return cls(flat)

    def to_value(self) -> str:
        """The raw header value for this range."""
        return "*" if self.tags is None else self.tags.value