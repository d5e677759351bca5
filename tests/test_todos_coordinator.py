"""Tests for the TODO coordinator."""

import pytest

from todoscan.core.types import TodoKind
from todoscan.errors import TextRetrievalError
from todoscan.loaders import InMemoryTextSource
from todopanel.controllers.base import CoordinatorContext
from todopanel.controllers.todos import TodosCoordinator, ToggleOutcome
from todopanel.errors import CoordinatorNotBoundError
from todopanel.lifecycle import (
    create_panel_environment,
    shutdown_background_workers,
    shutdown_gui,
    shutdown_panel,
)
from todopanel.services import NavigationRequest, NavigationService, TelemetryService

from .conftest import make_entry


class FailingSource:
    def iter_texts(self):
        raise TextRetrievalError("backend unavailable")
        yield  # pragma: no cover


def test_refresh_populates_state(coordinator):
    assert coordinator.refresh() is True

    state = coordinator.state
    assert len(state) == 5
    assert state.counts.todo == 3
    assert state.counts.fixme == 2
    assert [e.file_id for e in state.entries][:3] == ["src/main.rs"] * 3


def test_stale_result_is_discarded(coordinator):
    first = coordinator.request_refresh()
    second = coordinator.request_refresh()

    assert not coordinator.complete_refresh(first, [make_entry(message="stale")])
    assert coordinator.state.is_empty
    assert coordinator.context.telemetry.scans_discarded == 1

    assert coordinator.complete_refresh(second, [make_entry(message="fresh")])
    assert [e.message for e in coordinator.state.entries] == ["fresh"]


def test_out_of_order_completion(coordinator):
    first = coordinator.request_refresh()
    second = coordinator.request_refresh()

    coordinator.complete_refresh(second, [make_entry(message="new")])
    coordinator.complete_refresh(first, [make_entry(message="old")])

    assert [e.message for e in coordinator.state.entries] == ["new"]


def test_failed_refresh_keeps_previous_entries(navigation):
    coordinator = TodosCoordinator(FailingSource())
    coordinator.bind(CoordinatorContext(telemetry=TelemetryService(), navigator=navigation))
    generation = coordinator.request_refresh()
    coordinator.complete_refresh(generation, [make_entry()])

    with pytest.raises(TextRetrievalError):
        coordinator.refresh()

    assert len(coordinator.state) == 1


def test_toggle(coordinator):
    assert coordinator.toggle(panel_exists=False) is ToggleOutcome.SCAN
    assert coordinator.toggle(panel_exists=True) is ToggleOutcome.FOCUS


def test_activate_row_navigates(coordinator, navigation):
    coordinator.refresh()
    expected = coordinator.state.entries[1]

    request = coordinator.activate_row(1)

    assert request == NavigationRequest(file_id=expected.file_id, line=expected.line, column=expected.start_column)
    assert navigation.history == [request]
    assert coordinator.state.selected_index == 1


def test_activate_row_out_of_range_is_ignored(coordinator, navigation):
    coordinator.refresh()

    assert coordinator.activate_row(42) is None
    assert coordinator.activate_row(-1) is None
    assert navigation.history == []
    assert coordinator.state.selected_index is None


def test_navigator_errors_propagate(coordinator):
    def broken(request):
        raise OSError("file vanished")

    coordinator.context.navigator.set_handler(broken)
    coordinator.refresh()

    with pytest.raises(OSError):
        coordinator.activate_row(0)


def test_view_models(coordinator):
    coordinator.refresh()
    coordinator.activate_row(0)

    header = coordinator.header_view_model()
    assert (header.todo_label, header.fixme_label, header.total) == ("TODOs 3", "FIXMEs 2", 5)

    rows = coordinator.row_view_models()
    assert len(rows) == 5
    assert rows[0].selected and not rows[1].selected
    assert rows[0].display_text == f"{TodoKind.TODO.icon} parse arguments"
    assert rows[0].location == "src/main.rs:2"
    assert rows[1].icon == TodoKind.FIXME.icon


def test_teardown_closes_state(coordinator):
    generation = coordinator.request_refresh()
    coordinator.teardown()

    assert coordinator.state.is_closed
    assert coordinator.complete_refresh(generation, [make_entry()]) is False


def test_unbound_coordinator_refuses_to_run(text_source):
    coordinator = TodosCoordinator(text_source)
    coordinator.state.set_entries([make_entry()])

    with pytest.raises(CoordinatorNotBoundError):
        coordinator.activate_row(0)
    with pytest.raises(CoordinatorNotBoundError):
        coordinator.refresh()

    assert coordinator.state.selected_index is None
    assert coordinator.generation == 0


def test_bound_context_telemetry(coordinator):
    coordinator.refresh()

    assert isinstance(coordinator.context.navigator, NavigationService)
    assert coordinator.context.telemetry.scans_finished == 1


def test_bootstrap_wires_navigation_handler(text_source):
    opened = []
    environment = create_panel_environment(text_source, navigation_handler=opened.append)

    environment.todos.refresh()
    environment.todos.activate_row(0)

    assert [r.line for r in opened] == [2]
    assert environment.navigation.last_request is opened[0]
    assert environment.context.navigator is environment.navigation


def test_shutdown_gui_stops_workers_then_tears_down():
    calls = []

    class FakeWorker:
        def quit(self):
            calls.append("quit")

        def wait(self, timeout_ms):
            calls.append("wait")

    environment = create_panel_environment(InMemoryTextSource({}))
    shutdown_gui(coordinators=[environment.todos], workers=[FakeWorker()])

    assert calls == ["quit", "wait"]
    assert environment.todos.state.is_closed


def test_stuck_workers_are_reported():
    class SlowWorker:
        def quit(self):
            pass

        def wait(self, timeout_ms):
            return False

    slow = SlowWorker()

    assert shutdown_background_workers([slow], timeout_ms=10) == [slow]


def test_bind_and_teardown_context(text_source):
    coordinator = TodosCoordinator(text_source)
    assert not coordinator.bound

    coordinator.bind(CoordinatorContext())
    assert coordinator.bound

    coordinator.teardown()
    assert not coordinator.bound


def test_shutdown_panel_closes_environment(text_source):
    environment = create_panel_environment(text_source)
    environment.todos.refresh()

    shutdown_panel(environment)

    assert environment.todos.state.is_closed
    assert not environment.todos.bound
