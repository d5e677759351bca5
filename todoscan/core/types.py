"""
Types and data structures shared by the scanner and the panel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping


class TodoKind(Enum):
    """Classification of an annotation."""

    TODO = "todo"
    FIXME = "fixme"

    @property
    def label(self) -> str:
        return self.name

    @property
    def icon(self) -> str:
        # Check mark for plain TODOs, alert sign for FIXMEs.
        return "✅" if self is TodoKind.TODO else "⚠️"


@dataclass(frozen=True)
class SourceLocation:
    """File identifier and 1-based line number."""

    file_id: str
    line: int


@dataclass(frozen=True)
class ColumnRange:
    """0-based character span of the message inside its line (end exclusive)."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class TodoEntry:
    """One recognised TODO/FIXME occurrence."""

    location: SourceLocation
    kind: TodoKind
    message: str
    columns: ColumnRange

    @property
    def file_id(self) -> str:
        return self.location.file_id

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def start_column(self) -> int:
        return self.columns.start

    @property
    def end_column(self) -> int:
        return self.columns.end

    def display_location(self) -> str:
        """Return the ``file:line`` label shown under each panel row."""
        return f"{self.location.file_id}:{self.location.line}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.location.file_id,
            "line": self.location.line,
            "kind": self.kind.label,
            "message": self.message,
            "start_column": self.columns.start,
            "end_column": self.columns.end,
        }


@dataclass(frozen=True)
class TodoCounts:
    """Number of entries per kind, used for the panel header."""

    by_kind: Mapping[TodoKind, int] = field(default_factory=dict)

    def get(self, kind: TodoKind) -> int:
        return int(self.by_kind.get(kind, 0))

    def __getitem__(self, kind: TodoKind) -> int:
        return self.get(kind)

    def __iter__(self) -> Iterator[TodoKind]:
        return iter(TodoKind)

    @property
    def todo(self) -> int:
        return self.get(TodoKind.TODO)

    @property
    def fixme(self) -> int:
        return self.get(TodoKind.FIXME)

    @property
    def total(self) -> int:
        return sum(self.get(kind) for kind in TodoKind)

    def as_dict(self) -> Dict[str, int]:
        return {kind.label: self.get(kind) for kind in TodoKind}
