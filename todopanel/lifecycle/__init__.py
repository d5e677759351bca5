"""Lifecycle helpers for the TODO panel."""

from __future__ import annotations

from .app_shutdown import shutdown_application, shutdown_background_workers, shutdown_gui, shutdown_panel
from .bootstrap import BootstrapArtifacts, create_panel_environment

__all__ = [
    "BootstrapArtifacts",
    "create_panel_environment",
    "shutdown_application",
    "shutdown_background_workers",
    "shutdown_gui",
    "shutdown_panel",
]
