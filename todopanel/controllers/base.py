"""
Shared plumbing for panel coordinators.

Nothing here imports PySide6: coordinators are driven by the widgets but can
be built and exercised on their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..errors import CoordinatorNotBoundError
from ..services import NavigationService, Navigator, TelemetryService


@dataclass(slots=True)
class CoordinatorContext:
    """Services handed to a coordinator when the panel environment is built."""

    telemetry: TelemetryService = field(default_factory=TelemetryService)
    navigator: Navigator = field(default_factory=NavigationService)


@runtime_checkable
class Coordinator(Protocol):
    """Lifecycle hooks called by the bootstrap and shutdown helpers."""

    def bind(self, context: CoordinatorContext) -> None:
        """Attach the shared services."""

    def teardown(self) -> None:
        """Drop everything acquired since :meth:`bind`."""


class SimpleCoordinator:
    """Mixin storing the bound context."""

    def __init__(self) -> None:
        self._context: CoordinatorContext | None = None

    @property
    def bound(self) -> bool:
        return self._context is not None

    def bind(self, context: CoordinatorContext) -> None:
        self._context = context

    def teardown(self) -> None:
        self._context = None

    @property
    def context(self) -> CoordinatorContext:
        if self._context is None:
            raise CoordinatorNotBoundError(
                f"{type(self).__name__} used before bind(); build it with create_panel_environment"
            )
        return self._context
