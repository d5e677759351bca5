"""Application bootstrap helpers for the TODO panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from todoscan.loaders import TextSource
from todoscan.pipeline import ProjectScanner

from ..config import DEFAULT_PANEL_CONFIG, PanelConfig
from ..controllers.base import CoordinatorContext
from ..controllers.todos import TodosCoordinator
from ..services import NavigationHandler, NavigationService, TelemetryService


@dataclass(slots=True)
class BootstrapArtifacts:
    """Container for the coordinator/services created at startup."""

    context: CoordinatorContext
    navigation: NavigationService
    todos: TodosCoordinator


def create_panel_environment(
    text_source: TextSource,
    navigation_handler: Optional[NavigationHandler] = None,
    config: Optional[PanelConfig] = None,
) -> BootstrapArtifacts:
    """
    Create the coordinator and bind the shared context.

    The host supplies where text comes from and what to do with navigation
    requests; nothing is looked up from global state.
    """

    config = config or DEFAULT_PANEL_CONFIG
    navigation = NavigationService(handler=navigation_handler)
    context = CoordinatorContext(
        telemetry=TelemetryService(),
        navigator=navigation,
    )

    todos = TodosCoordinator(
        text_source,
        scanner=ProjectScanner(max_workers=config.scan_workers),
    )
    todos.bind(context)

    return BootstrapArtifacts(context=context, navigation=navigation, todos=todos)
