"""
Generic record and pattern-match types.

:class:`ClassifiedRecord` is what the heuristic classifier accumulates before
a domain adapter projects it into a typed record. :class:`ExtractedPattern`
is one match of the pattern extraction library.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class PatternKind(Enum):
    """Kinds of substrings the pattern library recognizes."""

    URL = "url"
    EMAIL = "email"
    TIME = "time"
    DATE = "date"
    FILE_PATH = "file_path"
    ERROR_LOCATION = "error_location"


class ContentType(Enum):
    """Coarse classification of a piece of text."""

    ERROR = "error"
    WARNING = "warning"
    URL = "url"
    EMAIL = "email"
    CODE = "code"
    TEXT = "text"


@dataclass(frozen=True)
class ErrorLocation:
    """A parsed ``file:line:column`` reference."""

    file: str
    line: int
    column: int | None = None


@dataclass(frozen=True)
class ExtractedPattern:
    """A matched substring plus its kind and position in the source text."""

    kind: PatternKind
    text: str
    start: int
    end: int
    location: ErrorLocation | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "text": self.text,
            "start": self.start,
            "end": self.end,
        }
        if self.location is not None:
            data["file"] = self.location.file
            data["line"] = self.location.line
            data["column"] = self.location.column
        return data


class ClassifiedRecord:
    """Ordered mapping from field name to string value.

    Fields keep the order in which they were first filled. ``fill`` is
    first-writer-wins; ``append`` accumulates into a catch-all field.
    """

    def __init__(self) -> None:
        self._fields: dict[str, str] = {}
        self._value_count = 0

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, name: str) -> str:
        return self._fields[name]

    def __repr__(self) -> str:
        return f"ClassifiedRecord({self._fields!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ClassifiedRecord):
            return self._fields == other._fields
        if isinstance(other, dict):
            return self._fields == other
        return NotImplemented

    @property
    def value_count(self) -> int:
        """Number of values routed into this record, including dropped ones."""
        return self._value_count

    def note_value(self) -> int:
        """Register a value and return its 0-based position in the record."""
        index = self._value_count
        self._value_count += 1
        return index

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._fields.get(name, default)

    def is_filled(self, name: str) -> bool:
        return bool(self._fields.get(name))

    def fill(self, name: str, value: str) -> bool:
        """Set ``name`` unless it already holds a non-empty value."""
        if self.is_filled(name):
            return False
        self._fields[name] = value
        return True

    def append(self, name: str, value: str, separator: str = " ") -> None:
        existing = self._fields.get(name)
        self._fields[name] = value if not existing else f"{existing}{separator}{value}"

    def as_dict(self) -> dict[str, str]:
        return dict(self._fields)
