"""Shared fixtures for the TODO panel test suite."""

from __future__ import annotations

import logging
import os

import pytest

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from todoscan.core.types import ColumnRange, SourceLocation, TodoEntry, TodoKind
from todoscan.loaders import InMemoryTextSource
from todopanel.controllers.base import CoordinatorContext
from todopanel.controllers.todos import TodosCoordinator
from todopanel.services import NavigationService, TelemetryService

SAMPLE_MAIN = """fn main() {
    // TODO: parse arguments
    let x = 1; // FIXME: overflow on 32-bit
    /* TODO: remove debug output */
    println!("{}", x);
}
"""

SAMPLE_LIB = """// just a comment
/// TODO= document this
/* fixme handle null */
"""


def make_entry(
    file_id: str = "src/main.rs",
    line: int = 1,
    kind: TodoKind = TodoKind.TODO,
    message: str = "do something",
    start: int = 9,
) -> TodoEntry:
    return TodoEntry(
        location=SourceLocation(file_id=file_id, line=line),
        kind=kind,
        message=message,
        columns=ColumnRange(start=start, end=start + len(message)),
    )


@pytest.fixture
def sample_buffers():
    return {"src/main.rs": SAMPLE_MAIN, "src/lib.rs": SAMPLE_LIB}


@pytest.fixture
def text_source(sample_buffers):
    return InMemoryTextSource(sample_buffers)


@pytest.fixture
def navigation():
    return NavigationService()


@pytest.fixture
def coordinator(text_source, navigation):
    coordinator = TodosCoordinator(text_source)
    coordinator.bind(CoordinatorContext(telemetry=TelemetryService(), navigator=navigation))
    return coordinator


@pytest.fixture
def project_tree(tmp_path):
    """Small project on disk with included, excluded and ignored files."""

    src = tmp_path / "src"
    src.mkdir()
    (src / "main.rs").write_text(SAMPLE_MAIN, encoding="utf-8")
    (src / "lib.rs").write_text(SAMPLE_LIB, encoding="utf-8")
    (src / "notes.txt").write_text("// TODO: not a source file\n", encoding="utf-8")

    vendored = tmp_path / "node_modules" / "dep"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text("// TODO: vendored\n", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_panel_log_handlers():
    """Remove handlers installed by configure_logging during a test."""

    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if getattr(handler, "_todopanel_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
