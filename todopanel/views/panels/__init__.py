"""Panels hosted by the main window."""

from .todos_panel import TodosPanel

__all__ = ["TodosPanel"]
