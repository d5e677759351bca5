"""TODO panel: header with counts and the clickable annotation list."""

from __future__ import annotations

from typing import List, Optional, Tuple

from loguru import logger
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from todoscan.core.types import TodoEntry
from todoscan.pipeline import ProjectScanResult

from ...controllers.panel_state import PanelSnapshot
from ...controllers.todos import TodosCoordinator
from ...services.navigation_service import NavigationRequest
from ...widgets.counts_header import CountsHeader
from ...workers.scan_worker import ScanWorker

__all__ = ["TodosPanel"]


class TodosPanel(QWidget):
    """List of scanned annotations backed by a :class:`TodosCoordinator`."""

    PERSISTENT_NAME = "TODOs"
    ICON = "✅"
    TOOLTIP = "TODOs and FIXMEs"

    navigation_requested = Signal(object)
    navigation_failed = Signal(str)
    scan_finished = Signal(int)

    def __init__(self, coordinator: TodosCoordinator, parent: QWidget | None = None):
        super().__init__(parent)
        self.coordinator = coordinator
        self._workers: List[ScanWorker] = []
        self._rendered_entries: Tuple[TodoEntry, ...] | None = None

        self._setup_ui()
        self._unsubscribe = self.coordinator.state.subscribe(self.render_snapshot)
        self.render_snapshot(self.coordinator.state.snapshot())

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        title_layout = QHBoxLayout()
        title = QLabel(f"{self.ICON} {self.PERSISTENT_NAME}")
        title.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        title_layout.addWidget(title)
        title_layout.addStretch()

        self.refresh_button = QPushButton("🔄 Refresh")
        self.refresh_button.setToolTip("Rescan the project")
        self.refresh_button.clicked.connect(self.refresh)
        title_layout.addWidget(self.refresh_button)
        layout.addLayout(title_layout)

        self.header = CountsHeader(self)
        layout.addWidget(self.header)

        self.list_widget = QListWidget(self)
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.list_widget.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerItem)
        self.list_widget.setAlternatingRowColors(True)
        self.list_widget.itemClicked.connect(self._on_item_clicked)
        self.list_widget.verticalScrollBar().valueChanged.connect(self._on_scrolled)
        layout.addWidget(self.list_widget)

        self.setToolTip(self.TOOLTIP)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_snapshot(self, snapshot: PanelSnapshot) -> None:
        """Render a state snapshot; the list is rebuilt only when entries changed."""

        self.header.update_counts(snapshot.counts)

        self.list_widget.blockSignals(True)
        self.list_widget.verticalScrollBar().blockSignals(True)
        try:
            if snapshot.entries is not self._rendered_entries:
                self._populate_list()
                self._rendered_entries = snapshot.entries
                self.list_widget.scrollToTop()

            if snapshot.selected_index is None:
                self.list_widget.clearSelection()
                self.list_widget.setCurrentRow(-1)
            else:
                self.list_widget.setCurrentRow(snapshot.selected_index)
        finally:
            self.list_widget.verticalScrollBar().blockSignals(False)
            self.list_widget.blockSignals(False)

    def _populate_list(self) -> None:
        self.list_widget.clear()
        for row in self.coordinator.row_view_models():
            item = QListWidgetItem(f"{row.display_text}\n    {row.location}")
            item.setToolTip(row.location)
            item.setData(Qt.ItemDataRole.UserRole, row.index)
            self.list_widget.addItem(item)

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------
    def refresh(self) -> int:
        """Start a background scan and return its generation."""

        generation = self.coordinator.request_refresh()
        worker = ScanWorker(generation, self.coordinator.text_source, self.coordinator.scanner)
        worker.scan_completed.connect(self._on_scan_completed)
        worker.scan_failed.connect(self._on_scan_failed)
        worker.finished.connect(self._forget_finished_workers)
        self._workers.append(worker)
        worker.start()
        logger.info("TODO scan #{} started", generation)
        return generation

    def _on_scan_completed(self, generation: int, result: ProjectScanResult) -> None:
        applied = self.coordinator.complete_refresh(generation, result.entries, result.duration)
        if applied:
            self.scan_finished.emit(generation)

    def _on_scan_failed(self, generation: int, message: str) -> None:
        self.coordinator.fail_refresh(generation, message)
        logger.error("TODO scan #{} failed: {}", generation, message)

    def _forget_finished_workers(self) -> None:
        for worker in [w for w in self._workers if w.isFinished()]:
            self._workers.remove(worker)
            worker.deleteLater()

    # ------------------------------------------------------------------
    # User interaction
    # ------------------------------------------------------------------
    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        index = item.data(Qt.ItemDataRole.UserRole)
        self.activate_row(int(index))

    def activate_row(self, index: int) -> Optional[NavigationRequest]:
        try:
            request = self.coordinator.activate_row(index)
        except Exception as exc:
            logger.error("Navigation failed: {}", exc)
            self.navigation_failed.emit(str(exc))
            return None
        if request is not None:
            self.navigation_requested.emit(request)
        return request

    def _on_scrolled(self, value: int) -> None:
        if not self.coordinator.state.is_closed:
            self.coordinator.state.scroll_to(value)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def iter_active_workers(self) -> List[ScanWorker]:
        return [worker for worker in self._workers if worker.isRunning()]

    def detach(self) -> None:
        """Stop rendering state changes; called before the panel is destroyed."""

        self._unsubscribe()
