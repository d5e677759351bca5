"""
Line-level recognition of TODO/FIXME comments.

Two rules are applied to every physical line:

- line comments: ``// TODO: message`` (rest of the line is the message)
- block comments: ``/* FIXME: message */`` (opener, keyword and closer on the
  same line; block bodies spanning several lines are not tracked)

Keyword and separator (``:``, ``=`` or whitespace) are matched
case-insensitively. Both rules can fire on the same line, in which case two
matches are returned, line rule first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Pattern

from .types import ColumnRange, TodoKind

LINE_COMMENT_PATTERN = r"(?i)//\s*(?:TODO|FIXME)(?::|=|\s)\s*(.+)"
BLOCK_COMMENT_PATTERN = r"(?i)/\*+\s*(?:TODO|FIXME)(?::|=|\s)\s*([^*]+)\*/"

FIXME_MARKER = "fixme"


class MatchRule(Enum):
    """Which comment rule produced a match."""

    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True)
class LineMatch:
    """A single rule hit on one line."""

    kind: TodoKind
    message: str
    columns: ColumnRange
    rule: MatchRule


def classify_line(line: str) -> TodoKind:
    """
    Return the kind of an annotation found on ``line``.

    The whole line is inspected, not only the message: any occurrence of
    "fixme" makes it a FIXME, so ``// TODO: fixme later`` is a FIXME.
    """
    if FIXME_MARKER in line.lower():
        return TodoKind.FIXME
    return TodoKind.TODO


class TodoMatcher:
    """Stateless matcher holding the compiled comment rules."""

    def __init__(
        self,
        line_pattern: Optional[Pattern[str]] = None,
        block_pattern: Optional[Pattern[str]] = None,
    ) -> None:
        self.line_pattern = line_pattern or re.compile(LINE_COMMENT_PATTERN)
        self.block_pattern = block_pattern or re.compile(BLOCK_COMMENT_PATTERN)

    def match_line(self, line: str) -> List[LineMatch]:
        """Return every annotation recognised on ``line`` (possibly none)."""
        matches: List[LineMatch] = []
        for rule, pattern in (
            (MatchRule.LINE, self.line_pattern),
            (MatchRule.BLOCK, self.block_pattern),
        ):
            found = pattern.search(line)
            if found is None:
                continue
            matches.append(self._build_match(line, found, rule))
        return matches

    @staticmethod
    def _build_match(line: str, found: "re.Match[str]", rule: MatchRule) -> LineMatch:
        raw = found.group(1)
        message = raw.strip()
        # Shift the span so that it covers the stripped message only.
        start = found.start(1) + (len(raw) - len(raw.lstrip()))
        return LineMatch(
            kind=classify_line(line),
            message=message,
            columns=ColumnRange(start=start, end=start + len(message)),
            rule=rule,
        )


DEFAULT_MATCHER = TodoMatcher()


def match_line(line: str) -> List[LineMatch]:
    """Apply the default matcher to a single line."""
    return DEFAULT_MATCHER.match_line(line)
