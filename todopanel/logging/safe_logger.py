"""
Logger adapter for text coming out of scanned files.

Annotation messages are arbitrary user text: they can be very long or contain
control characters that break console and log-file output. The adapter cleans
string arguments before they reach the handlers.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import DEFAULT_PANEL_CONFIG, PanelConfig

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
MAX_ARG_CHARS = 200

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
_HANDLER_MARKER = "_todopanel_handler"


def sanitize_for_log(value: Any, max_chars: int = MAX_ARG_CHARS) -> Any:
    """Strip control characters and truncate long strings; other values pass through."""
    if not isinstance(value, str):
        return value
    cleaned = _CONTROL_CHARS.sub("?", value)
    if len(cleaned) > max_chars:
        cleaned = cleaned[:max_chars] + "…"
    return cleaned


class SafeLoggerAdapter(logging.LoggerAdapter):
    """Adapter that sanitises positional arguments and ``extra`` values."""

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None,
                 max_chars: int = MAX_ARG_CHARS):
        super().__init__(logger, extra or {})
        self.max_chars = max_chars

    def process(self, msg, kwargs):
        if "extra" in kwargs and isinstance(kwargs["extra"], dict):
            kwargs["extra"] = {
                key: sanitize_for_log(value, self.max_chars)
                for key, value in kwargs["extra"].items()
            }
        return msg, kwargs

    def log(self, level, msg, *args, **kwargs):
        safe_args = tuple(sanitize_for_log(arg, self.max_chars) for arg in args)
        # Attribute the record to the caller of info()/debug(), not to this method.
        kwargs.setdefault("stacklevel", 2)
        super().log(level, msg, *safe_args, **kwargs)

    def log_with_context(self, level: int, msg: str, context: Optional[Dict[str, Any]] = None, **kwargs):
        """Log ``msg`` followed by a sanitised ``key=value`` context."""
        if context:
            rendered = ", ".join(
                f"{key}={sanitize_for_log(value, self.max_chars)}" for key, value in context.items()
            )
            kwargs.setdefault("stacklevel", 3)
            self.log(level, "%s | %s", msg, rendered, **kwargs)
        else:
            kwargs.setdefault("stacklevel", 3)
            self.log(level, msg, **kwargs)


def get_safe_logger(name: str, max_chars: int = MAX_ARG_CHARS) -> SafeLoggerAdapter:
    """Return a :class:`SafeLoggerAdapter` around ``logging.getLogger(name)``.

    Handlers are installed once on the root logger by :func:`configure_logging`;
    this function never adds handlers itself.
    """
    return SafeLoggerAdapter(logging.getLogger(name), max_chars=max_chars)


def configure_logging(config: Optional[PanelConfig] = None) -> logging.Logger:
    """
    Install console and optional rotating file handlers on the root logger.

    Calling it again replaces the handlers installed by a previous call
    instead of stacking duplicates.
    """
    config = config or DEFAULT_PANEL_CONFIG
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    if config.log_to_file:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "todopanel.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(getattr(logging, config.log_level, logging.INFO))
    return root_logger

