"""
Annotation extractor: runs the matcher over a whole text buffer.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .matcher import DEFAULT_MATCHER, TodoMatcher
from .types import SourceLocation, TodoEntry


def physical_lines(text: str) -> List[str]:
    """
    Split ``text`` into physical lines.

    Lines end at ``"\\n"``; one trailing ``"\\r"`` is dropped. A final line
    without newline is kept, a trailing newline does not add an empty line.
    Other Unicode line separators are left inside their line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def count_lines(text: str) -> int:
    return len(physical_lines(text))


class TodoExtractor:
    """Drives a :class:`TodoMatcher` over text buffers."""

    def __init__(self, matcher: Optional[TodoMatcher] = None) -> None:
        self.matcher = matcher or DEFAULT_MATCHER

    def scan(self, text: str, file_id: str) -> List[TodoEntry]:
        """
        Scan a buffer and return its annotations in line order.

        Args:
            text: full text of the file
            file_id: identifier stored in every entry's location

        Returns:
            List of entries; a line can contribute a line-comment entry
            followed by a block-comment entry.
        """
        entries: List[TodoEntry] = []
        for number, line in enumerate(physical_lines(text), start=1):
            for found in self.matcher.match_line(line):
                entries.append(
                    TodoEntry(
                        location=SourceLocation(file_id=file_id, line=number),
                        kind=found.kind,
                        message=found.message,
                        columns=found.columns,
                    )
                )
        return entries

    def scan_many(self, pairs: Iterable[Tuple[str, str]]) -> List[TodoEntry]:
        """Scan ``(file_id, text)`` pairs sequentially, keeping file order."""
        entries: List[TodoEntry] = []
        for file_id, text in pairs:
            entries.extend(self.scan(text, file_id))
        return entries


_DEFAULT_EXTRACTOR = TodoExtractor()


def scan(text: str, file_id: str = "<buffer>") -> List[TodoEntry]:
    """Scan one buffer with the default extractor."""
    return _DEFAULT_EXTRACTOR.scan(text, file_id)
