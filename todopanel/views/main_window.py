"""Host window: a plain text editor with the TODO panel docked beside it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QFont, QKeySequence, QTextCursor
from PySide6.QtWidgets import QApplication, QDockWidget, QMainWindow, QPlainTextEdit, QWidget

from todoscan.loaders import FileSystemTextSource

from ..config import PanelConfig, load_config
from ..controllers.todos import TodosCoordinator, ToggleOutcome
from ..errors import ConfigError
from ..lifecycle.app_shutdown import shutdown_panel
from ..lifecycle.bootstrap import BootstrapArtifacts, create_panel_environment
from ..logging.safe_logger import configure_logging
from ..services.navigation_service import NavigationRequest
from .panels.todos_panel import TodosPanel

__all__ = ["EditorNavigator", "MainWindow", "qt_column", "run"]

_DOCK_AREAS = {
    "left": Qt.DockWidgetArea.LeftDockWidgetArea,
    "right": Qt.DockWidgetArea.RightDockWidgetArea,
    "bottom": Qt.DockWidgetArea.BottomDockWidgetArea,
}


def qt_column(line: str, column: int) -> int:
    """Convert a code-point column into the UTF-16 offset Qt cursors use."""
    prefix = line[: max(column, 0)]
    return len(prefix.encode("utf-16-le")) // 2


class EditorNavigator:
    """Opens files of the project in a ``QPlainTextEdit`` and moves its cursor."""

    def __init__(self, editor: QPlainTextEdit, root: Path, encoding: str = "utf-8") -> None:
        self.editor = editor
        self.root = root
        self.encoding = encoding
        self.current_file: Optional[Path] = None

    def resolve(self, file_id: str) -> Path:
        return self.root if self.root.is_file() else self.root / file_id

    def open(self, request: NavigationRequest) -> None:
        path = self.resolve(request.file_id)
        if path != self.current_file:
            # OSError remonte jusqu'au panneau, qui le journalise
            self.editor.setPlainText(path.read_text(encoding=self.encoding, errors="replace"))
            self.current_file = path

        block = self.editor.document().findBlockByNumber(request.row)
        cursor = QTextCursor(block)
        cursor.movePosition(
            QTextCursor.MoveOperation.Right,
            QTextCursor.MoveMode.MoveAnchor,
            qt_column(block.text(), request.column),
        )
        self.editor.setTextCursor(cursor)
        self.editor.centerCursor()
        self.editor.setFocus()


class MainWindow(QMainWindow):
    """Minimal editor host exposing the "Show TODOs" toggle."""

    def __init__(self, root: Path, config: PanelConfig, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.root = root
        self.config = config

        self.editor = QPlainTextEdit(self)
        self.editor.setReadOnly(True)
        self.editor.setFont(QFont("Monospace", 10))
        self.setCentralWidget(self.editor)

        self.navigator = EditorNavigator(self.editor, root, encoding=config.encoding)
        self.environment: BootstrapArtifacts = create_panel_environment(
            FileSystemTextSource(root, config.to_scan_config()),
            navigation_handler=self.navigator.open,
            config=config,
        )
        self.todos_dock: Optional[QDockWidget] = None
        self.todos_panel: Optional[TodosPanel] = None

        self.setWindowTitle(f"TODO Panel - {root}")
        self.resize(1200, 800)
        self.setup_toolbar()
        self.statusBar().showMessage("Ready")

    @property
    def coordinator(self) -> TodosCoordinator:
        return self.environment.todos

    def setup_toolbar(self) -> None:
        toolbar = self.addToolBar("TODOs")
        toolbar.setObjectName("todos_toolbar")

        self.toggle_todos_action = QAction(f"{TodosPanel.ICON} Show TODOs", self)
        self.toggle_todos_action.setShortcut(QKeySequence("Ctrl+Shift+T"))
        self.toggle_todos_action.setToolTip(TodosPanel.TOOLTIP)
        self.toggle_todos_action.triggered.connect(self.toggle_todos_panel)
        toolbar.addAction(self.toggle_todos_action)

    def toggle_todos_panel(self) -> None:
        outcome = self.coordinator.toggle(self.todos_dock is not None)
        if outcome is ToggleOutcome.FOCUS and self.todos_dock is not None:
            self.todos_dock.show()
            self.todos_dock.raise_()
            if self.todos_panel is not None:
                self.todos_panel.list_widget.setFocus()
            return
        self._create_todos_dock()
        if self.todos_panel is not None:
            self.todos_panel.refresh()

    def _create_todos_dock(self) -> None:
        self.todos_panel = TodosPanel(self.coordinator, parent=self)
        self.todos_panel.scan_finished.connect(self._on_scan_finished)
        self.todos_panel.navigation_failed.connect(
            lambda message: self.statusBar().showMessage(f"Cannot open file: {message}", 5000)
        )

        dock = QDockWidget(TodosPanel.PERSISTENT_NAME, self)
        dock.setObjectName("todos_dock")
        dock.setWidget(self.todos_panel)
        self.addDockWidget(_DOCK_AREAS[self.config.dock_area], dock)
        self.todos_dock = dock
        logger.debug("TODO panel docked ({})", self.config.dock_area)

    def _on_scan_finished(self, generation: int) -> None:
        counts = self.coordinator.state.counts
        self.statusBar().showMessage(f"{counts.todo} TODOs, {counts.fixme} FIXMEs", 5000)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        workers = []
        if self.todos_panel is not None:
            self.todos_panel.detach()
            workers = self.todos_panel.iter_active_workers()
        shutdown_panel(self.environment, workers=workers)
        super().closeEvent(event)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todopanel", description="Browse TODO/FIXME comments of a project.")
    parser.add_argument("root", nargs="?", type=Path, default=Path.cwd(), help="Project directory or file.")
    parser.add_argument("--config", "-c", type=Path, help="YAML configuration file.")
    parser.add_argument("--no-scan", action="store_true", help="Do not open the panel at startup.")
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """GUI entry point."""

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    if not args.root.exists():
        parser.error(f"Project not found: {args.root}")

    configure_logging(config)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = MainWindow(args.root.resolve(), config)
    window.show()
    if not args.no_scan:
        window.toggle_todos_panel()
    return app.exec()
