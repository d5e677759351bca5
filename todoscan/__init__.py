"""
todoscan - TODO/FIXME comment extraction
========================================

Pure-Python scanning engine used by the TODO panel:
- core: matcher, extractor, counting, shared types
- loaders: text sources (in-memory buffers, file trees)
- pipeline: project-wide scans on a thread pool
"""

from .core import (
    ColumnRange,
    SourceLocation,
    TodoCounts,
    TodoEntry,
    TodoExtractor,
    TodoKind,
    TodoMatcher,
    count_by_kind,
    scan,
)
from .errors import TextRetrievalError, TodoScanError

__version__ = "1.0.0"
__all__ = [
    "ColumnRange",
    "SourceLocation",
    "TextRetrievalError",
    "TodoCounts",
    "TodoEntry",
    "TodoExtractor",
    "TodoKind",
    "TodoMatcher",
    "TodoScanError",
    "count_by_kind",
    "scan",
]
