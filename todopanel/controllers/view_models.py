"""View-model dataclasses used by the TODO panel."""

from __future__ import annotations

from dataclasses import dataclass

from todoscan.core.types import TodoCounts, TodoEntry


@dataclass(slots=True)
class TodoHeaderViewModel:
    """Counts shown above the list."""

    todo_label: str
    fixme_label: str
    total: int

    @classmethod
    def from_counts(cls, counts: TodoCounts) -> "TodoHeaderViewModel":
        return cls(
            todo_label=f"TODOs {counts.todo}",
            fixme_label=f"FIXMEs {counts.fixme}",
            total=counts.total,
        )


@dataclass(slots=True)
class TodoRowViewModel:
    """Representation of one list row."""

    index: int
    entry: TodoEntry
    icon: str
    message: str
    location: str
    selected: bool = False

    @property
    def display_text(self) -> str:
        return f"{self.icon} {self.message}"
