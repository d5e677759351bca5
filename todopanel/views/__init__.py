"""
TODO Panel Views Package
========================

Qt widgets hosting the TODO panel.
"""

from .main_window import EditorNavigator, MainWindow, run
from .panels import TodosPanel

__all__ = ["EditorNavigator", "MainWindow", "TodosPanel", "run"]
