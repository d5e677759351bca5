"""
Counts header widget
====================

Compact header showing how many TODOs and FIXMEs the panel holds.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget

from todoscan.core.types import TodoCounts, TodoKind

from ..controllers.view_models import TodoHeaderViewModel


class CountsHeader(QFrame):
    """Header with one muted counter per kind."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.todo_label: QLabel
        self.fixme_label: QLabel
        self._setup_ui()
        self.update_counts(TodoCounts({kind: 0 for kind in TodoKind}))

    def _setup_ui(self) -> None:
        self.setFrameStyle(QFrame.Shape.NoFrame)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        self.todo_label = self._make_label()
        self.fixme_label = self._make_label()
        layout.addWidget(self.todo_label)
        layout.addStretch()
        layout.addWidget(self.fixme_label)

    def _make_label(self) -> QLabel:
        label = QLabel(self)
        label.setFont(QFont("Arial", 10))
        label.setStyleSheet("color: #cccccc;")
        label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        return label

    def update_counts(self, counts: TodoCounts) -> None:
        self.apply_view_model(TodoHeaderViewModel.from_counts(counts))

    def apply_view_model(self, view_model: TodoHeaderViewModel) -> None:
        self.todo_label.setText(view_model.todo_label)
        self.fixme_label.setText(view_model.fixme_label)
