"""Telemetry/logging facade for scan activity."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..logging.safe_logger import SafeLoggerAdapter, get_safe_logger


@dataclass(slots=True)
class TelemetryService:
    """Logs scan lifecycle events and keeps simple counters."""

    logger: SafeLoggerAdapter = field(default_factory=lambda: get_safe_logger("todopanel.telemetry"))
    scans_started: int = 0
    scans_finished: int = 0
    scans_discarded: int = 0

    def info(self, message: str, *args: object) -> None:
        """Log an informational message."""

        self.logger.info(message, *args)

    def scan_started(self, generation: int) -> None:
        self.scans_started += 1
        self.logger.debug("Scan #%d requested", generation)

    def scan_finished(self, generation: int, count: int, duration: float | None = None) -> None:
        self.scans_finished += 1
        if duration is None:
            self.logger.info("Scan #%d applied: %d annotations", generation, count)
        else:
            self.logger.info(
                "Scan #%d applied: %d annotations in %.3fs", generation, count, duration
            )

    def scan_discarded(self, generation: int, latest: int) -> None:
        self.scans_discarded += 1
        self.logger.info("Discarding stale scan #%d (latest is #%d)", generation, latest)
