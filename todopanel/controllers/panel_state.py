"""
State owned by the TODO panel: entries, counts, selection and scroll.

Lifecycle::

    EMPTY --set_entries--> POPULATED --set_entries--> POPULATED
      \\                        |
       `------- close() -------+--> CLOSED (terminal)

Entries are never mutated in place. ``set_entries`` swaps the whole tuple and
every derived value in one step, and listeners receive an immutable
:class:`PanelSnapshot`, so a renderer cannot observe a half-updated list.
Mutations must come from the thread that owns the UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from todoscan.core.counting import count_by_kind
from todoscan.core.types import TodoCounts, TodoEntry

from ..errors import PanelClosedError, SelectionOutOfRangeError
from ..services.navigation_service import NavigationRequest


class PanelPhase(Enum):
    EMPTY = "empty"
    POPULATED = "populated"
    CLOSED = "closed"


@dataclass(frozen=True)
class PanelSnapshot:
    """Consistent read-only view of the panel state."""

    entries: Tuple[TodoEntry, ...]
    counts: TodoCounts
    selected_index: Optional[int]
    scroll_position: int
    phase: PanelPhase


StateListener = Callable[[PanelSnapshot], None]


class TodoPanelState:
    """Owns the scanned entries displayed by the panel."""

    def __init__(self) -> None:
        self._entries: Tuple[TodoEntry, ...] = ()
        self._counts: TodoCounts = count_by_kind(())
        self._selected_index: Optional[int] = None
        self._scroll_position = 0
        self._phase = PanelPhase.EMPTY
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def entries(self) -> Tuple[TodoEntry, ...]:
        return self._entries

    @property
    def counts(self) -> TodoCounts:
        return self._counts

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    @property
    def selected_entry(self) -> Optional[TodoEntry]:
        if self._selected_index is None:
            return None
        return self._entries[self._selected_index]

    @property
    def scroll_position(self) -> int:
        return self._scroll_position

    @property
    def phase(self) -> PanelPhase:
        return self._phase

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def is_closed(self) -> bool:
        return self._phase is PanelPhase.CLOSED

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> PanelSnapshot:
        return PanelSnapshot(
            entries=self._entries,
            counts=self._counts,
            selected_index=self._selected_index,
            scroll_position=self._scroll_position,
            phase=self._phase,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_entries(self, entries: Iterable[TodoEntry]) -> None:
        """Replace the entries, clear the selection and scroll back to the top."""
        self._ensure_open()
        new_entries = tuple(entries)
        self._entries = new_entries
        self._counts = count_by_kind(new_entries)
        self._selected_index = None
        self._scroll_position = 0
        self._phase = PanelPhase.POPULATED
        self._notify()

    def select_entry(self, index: int) -> TodoEntry:
        """
        Mark the entry at ``index`` as selected and return it.

        Raises:
            SelectionOutOfRangeError: ``index`` is negative or past the end.
        """
        self._ensure_open()
        if not 0 <= index < len(self._entries):
            raise SelectionOutOfRangeError(index, len(self._entries))
        self._selected_index = index
        self._notify()
        return self._entries[index]

    def clear_selection(self) -> None:
        self._ensure_open()
        if self._selected_index is not None:
            self._selected_index = None
            self._notify()

    def scroll_to(self, position: int) -> int:
        """Record the first visible row reported by the host; returns the clamped value."""
        self._ensure_open()
        upper = max(len(self._entries) - 1, 0)
        clamped = min(max(position, 0), upper)
        if clamped != self._scroll_position:
            self._scroll_position = clamped
            self._notify()
        return clamped

    def close(self) -> None:
        """Tear the panel down. Further mutations raise :class:`PanelClosedError`."""
        if self._phase is PanelPhase.CLOSED:
            return
        self._phase = PanelPhase.CLOSED
        self._notify()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Derived requests
    # ------------------------------------------------------------------
    @staticmethod
    def navigation_request_for(entry: TodoEntry) -> NavigationRequest:
        """Return where the host should jump for ``entry``; performs no navigation."""
        return NavigationRequest(
            file_id=entry.file_id,
            line=entry.line,
            column=entry.start_column,
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with a snapshot after each change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def _ensure_open(self) -> None:
        if self._phase is PanelPhase.CLOSED:
            raise PanelClosedError("The TODO panel has been closed")
