"""Qt worker running a project scan off the UI thread."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QThread, Signal

from todoscan.loaders import TextSource
from todoscan.pipeline import ProjectScanner, ProjectScanResult


class ScanWorker(QThread):
    """
    Scans a text source on a background thread.

    The result is emitted once, as a whole, together with the generation it
    was started for; the receiving coordinator decides whether it is stale.
    """

    scan_completed = Signal(int, object)
    scan_failed = Signal(int, str)

    def __init__(
        self,
        generation: int,
        text_source: TextSource,
        scanner: Optional[ProjectScanner] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.generation = generation
        self.text_source = text_source
        self.scanner = scanner or ProjectScanner()
        self.result: Optional[ProjectScanResult] = None

    def run(self) -> None:  # pragma: no cover - Qt thread
        try:
            self.result = self.scanner.scan_source(self.text_source)
        except Exception as exc:
            self.scan_failed.emit(self.generation, str(exc))
            return
        self.scan_completed.emit(self.generation, self.result)


__all__ = ["ScanWorker"]
