"""Result dataclass for project-wide scans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.counting import count_by_kind
from ..core.types import TodoCounts, TodoEntry


@dataclass
class ProjectScanResult:
    """Entries of every scanned file, in file order then line order."""

    entries: List[TodoEntry] = field(default_factory=list)
    files_scanned: int = 0
    duration: float = 0.0

    @property
    def counts(self) -> TodoCounts:
        return count_by_kind(self.entries)
