"""
Service abstractions used by the TODO panel.

Each service hides side-effectful behaviour behind a simple interface so
coordinators can remain pure-Python and test-friendly.
"""

from .navigation_service import NavigationHandler, NavigationRequest, NavigationService, Navigator
from .telemetry import TelemetryService

__all__ = [
    "NavigationHandler",
    "NavigationRequest",
    "NavigationService",
    "Navigator",
    "TelemetryService",
]
