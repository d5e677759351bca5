"""Exceptions raised by the scanning engine."""

from __future__ import annotations


class TodoScanError(Exception):
    """Base class for scanning engine errors."""


class TextRetrievalError(TodoScanError):
    """Raised when a text source cannot supply the text of a file."""

    def __init__(self, message: str, file_id: str | None = None) -> None:
        super().__init__(message)
        self.file_id = file_id
