"""TODO coordinator: refresh cycles, row activation and display data."""

from __future__ import annotations

import time
from enum import Enum
from typing import Iterable, List, Optional

from todoscan.core.types import TodoEntry
from todoscan.loaders import TextSource
from todoscan.pipeline import ProjectScanner

from ..errors import SelectionOutOfRangeError
from ..logging.safe_logger import get_safe_logger
from ..services.navigation_service import NavigationRequest
from .base import Coordinator, SimpleCoordinator
from .panel_state import TodoPanelState
from .view_models import TodoHeaderViewModel, TodoRowViewModel

logger = get_safe_logger(__name__)


class ToggleOutcome(Enum):
    """What the host should do after the toggle command."""

    FOCUS = "focus"
    SCAN = "scan"


class TodosCoordinator(SimpleCoordinator, Coordinator):
    """
    Connects the text source, the scanner and the panel state.

    A refresh is split in two so that the scan itself can run on a worker
    thread: :meth:`request_refresh` hands out a generation number, and
    :meth:`complete_refresh` applies a result only if no newer refresh was
    requested in the meantime.
    """

    __slots__ = ("text_source", "scanner", "state", "_generation")

    def __init__(
        self,
        text_source: TextSource,
        scanner: Optional[ProjectScanner] = None,
        state: Optional[TodoPanelState] = None,
    ) -> None:
        super().__init__()
        self.text_source = text_source
        self.scanner = scanner or ProjectScanner()
        self.state = state or TodoPanelState()
        self._generation = 0

    # ------------------------------------------------------------------
    # Refresh cycle
    # ------------------------------------------------------------------
    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def request_refresh(self) -> int:
        """Start a new refresh and return its generation number."""

        telemetry = self.context.telemetry
        self._generation += 1
        telemetry.scan_started(self._generation)
        return self._generation

    def complete_refresh(
        self,
        generation: int,
        entries: Iterable[TodoEntry],
        duration: float | None = None,
    ) -> bool:
        """Apply a scan result unless a newer refresh superseded it."""

        if self.state.is_closed:
            logger.debug("Panel closed, dropping scan #%d", generation)
            return False
        if not self.is_current(generation):
            self.context.telemetry.scan_discarded(generation, self._generation)
            return False
        self.state.set_entries(entries)
        self.context.telemetry.scan_finished(generation, len(self.state), duration)
        return True

    def fail_refresh(self, generation: int, error: BaseException | str) -> None:
        """Record an upstream failure; the panel keeps its previous entries."""

        if not self.is_current(generation):
            logger.debug("Ignoring failure of stale scan #%d: %s", generation, error)
            return
        logger.error("Scan #%d failed: %s", generation, error)

    def scan(self) -> List[TodoEntry]:
        """Run the scanner over the text source and return the entries."""

        return self.scanner.scan_source(self.text_source).entries

    def refresh(self) -> bool:
        """Synchronous refresh. Retrieval errors propagate after being logged."""

        generation = self.request_refresh()
        start_time = time.time()
        try:
            entries = self.scan()
        except Exception as exc:
            self.fail_refresh(generation, exc)
            raise
        return self.complete_refresh(generation, entries, time.time() - start_time)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def toggle(self, panel_exists: bool) -> ToggleOutcome:
        """Decide how to react to the toggle command."""

        if panel_exists:
            logger.debug("Toggling existing TODO panel")
            return ToggleOutcome.FOCUS
        logger.debug("Creating TODO panel")
        return ToggleOutcome.SCAN

    def activate_row(self, index: int) -> Optional[NavigationRequest]:
        """
        Handle a click on row ``index``.

        Out-of-range indexes (e.g. a click racing a refresh) are ignored and
        return None. Navigator errors propagate to the host, and an unbound
        coordinator raises :class:`CoordinatorNotBoundError` before selecting.
        """

        navigator = self.context.navigator
        try:
            entry = self.state.select_entry(index)
        except SelectionOutOfRangeError as exc:
            logger.warning("Ignoring click: %s", exc)
            return None
        request = self.state.navigation_request_for(entry)
        navigator.open(request)
        return request

    # ------------------------------------------------------------------
    # Display data
    # ------------------------------------------------------------------
    def header_view_model(self) -> TodoHeaderViewModel:
        return TodoHeaderViewModel.from_counts(self.state.counts)

    def row_view_models(self) -> List[TodoRowViewModel]:
        snapshot = self.state.snapshot()
        return [
            TodoRowViewModel(
                index=index,
                entry=entry,
                icon=entry.kind.icon,
                message=entry.message,
                location=entry.display_location(),
                selected=index == snapshot.selected_index,
            )
            for index, entry in enumerate(snapshot.entries)
        ]

    def teardown(self) -> None:
        self.state.close()
        super().teardown()
