"""Shutdown sequence for the TODO panel."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..controllers.base import Coordinator

if TYPE_CHECKING:
    from .bootstrap import BootstrapArtifacts

logger = logging.getLogger(__name__)

__all__ = [
    "shutdown_application",
    "shutdown_background_workers",
    "shutdown_gui",
    "shutdown_panel",
]


def shutdown_background_workers(workers: Iterable[object], timeout_ms: int = 5000) -> list:
    """
    Wait for scan workers still running and return those that did not stop.

    A scan cannot be interrupted halfway; ``quit`` only ends the thread's
    event loop, so the current scan is given ``timeout_ms`` to finish.
    """

    stuck = []
    for worker in workers:
        quit_ = getattr(worker, "quit", None)
        if callable(quit_):
            quit_()
        wait = getattr(worker, "wait", None)
        finished = wait(timeout_ms) if callable(wait) else True
        if finished is False:
            logger.warning("Scan worker %r still running after %d ms", worker, timeout_ms)
            stuck.append(worker)
    return stuck


def shutdown_application(coordinators: Iterable[Coordinator]) -> None:
    """Tear down coordinators; a failing one does not stop the others."""

    for coordinator in coordinators:
        try:
            coordinator.teardown()
        except Exception as exc:  # pragma: no cover - logged and skipped
            logger.error("Teardown failed for %s: %s", type(coordinator).__name__, exc)


def shutdown_gui(
    *,
    coordinators: Iterable[Coordinator] = (),
    workers: Iterable[object] = (),
) -> None:
    """Stop workers first so that no late result reaches a closed panel."""

    shutdown_background_workers(list(workers))
    shutdown_application(coordinators)
    logger.info("TODO panel shut down")


def shutdown_panel(artifacts: BootstrapArtifacts, workers: Iterable[object] = ()) -> None:
    """Shut down an environment built by :func:`create_panel_environment`."""

    shutdown_gui(coordinators=[artifacts.todos], workers=workers)
