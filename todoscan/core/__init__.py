"""Scanning core: types, matcher, extractor and counting."""

from .counting import count_by_kind, filter_by_kind
from .extractor import TodoExtractor, count_lines, physical_lines, scan
from .matcher import LineMatch, MatchRule, TodoMatcher, classify_line, match_line
from .types import ColumnRange, SourceLocation, TodoCounts, TodoEntry, TodoKind

__all__ = [
    "ColumnRange",
    "LineMatch",
    "MatchRule",
    "SourceLocation",
    "TodoCounts",
    "TodoEntry",
    "TodoExtractor",
    "TodoKind",
    "TodoMatcher",
    "classify_line",
    "count_by_kind",
    "count_lines",
    "filter_by_kind",
    "match_line",
    "physical_lines",
    "scan",
]
