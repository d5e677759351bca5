"""
Coordinators and state for the TODO panel.

Everything here is pure Python: the Qt widgets only render what these
objects expose and forward user actions to them.
"""

from .base import Coordinator, CoordinatorContext, SimpleCoordinator
from .panel_state import PanelPhase, PanelSnapshot, TodoPanelState
from .todos import TodosCoordinator, ToggleOutcome
from .view_models import TodoHeaderViewModel, TodoRowViewModel

__all__ = [
    "Coordinator",
    "CoordinatorContext",
    "PanelPhase",
    "PanelSnapshot",
    "SimpleCoordinator",
    "TodoHeaderViewModel",
    "TodoPanelState",
    "TodoRowViewModel",
    "TodosCoordinator",
    "ToggleOutcome",
]
