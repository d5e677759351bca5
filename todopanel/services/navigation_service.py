"""Navigation requests handed from the panel to the host editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class NavigationRequest:
    """Where the host should open a file and place the cursor."""

    file_id: str
    line: int
    column: int

    @property
    def row(self) -> int:
        """Zero-based line index, as editor cursor models usually expect."""

        return self.line - 1


@runtime_checkable
class Navigator(Protocol):
    """Host collaborator that performs the actual navigation."""

    def open(self, request: NavigationRequest) -> None:
        """Open the file and move the cursor to the requested position."""


NavigationHandler = Callable[[NavigationRequest], None]


@dataclass(slots=True)
class NavigationService:
    """
    Default :class:`Navigator` that forwards requests to a host handler.

    Every request is recorded so tests and headless runs can inspect what
    would have been opened. Handler errors propagate to the caller.
    """

    handler: Optional[NavigationHandler] = None
    history: List[NavigationRequest] = field(default_factory=list)

    def set_handler(self, handler: NavigationHandler | None) -> None:
        """Replace the host handler."""

        self.handler = handler

    def open(self, request: NavigationRequest) -> None:
        self.history.append(request)
        if self.handler is not None:
            self.handler(request)

    @property
    def last_request(self) -> Optional[NavigationRequest]:
        return self.history[-1] if self.history else None
