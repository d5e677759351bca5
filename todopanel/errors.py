"""Exceptions raised by the panel layer."""

from __future__ import annotations


class PanelError(Exception):
    """Base class for panel errors."""


class SelectionOutOfRangeError(PanelError, IndexError):
    """Raised when a selection index does not address a current entry."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Selection index {index} out of range for {size} entries")
        self.index = index
        self.size = size


class PanelClosedError(PanelError):
    """Raised when a closed panel is mutated."""


class ConfigError(PanelError, ValueError):
    """Raised for invalid configuration values."""


class CoordinatorNotBoundError(PanelError, RuntimeError):
    """Raised when a coordinator is used before its context was bound."""
