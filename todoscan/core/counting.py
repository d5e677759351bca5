"""Aggregation helpers for the panel header."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .types import TodoCounts, TodoEntry, TodoKind


def count_by_kind(entries: Iterable[TodoEntry]) -> TodoCounts:
    """Return how many entries of each kind ``entries`` holds."""
    totals: Dict[TodoKind, int] = {kind: 0 for kind in TodoKind}
    for entry in entries:
        totals[entry.kind] += 1
    return TodoCounts(by_kind=totals)


def filter_by_kind(entries: Iterable[TodoEntry], kind: TodoKind) -> List[TodoEntry]:
    return [entry for entry in entries if entry.kind is kind]
