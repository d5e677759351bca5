"""
Configuration for the TODO panel.

Values come from ``TODOPANEL_*`` environment variables and can be overridden
by a YAML file passed on the command line.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional

import yaml

from todoscan.core.config import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS, ScanConfig

from .errors import ConfigError

ENV_PREFIX = "TODOPANEL_"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_DOCK_AREAS = {"left", "right", "bottom"}

_INT_FIELDS = ("max_file_bytes", "scan_workers")
_BOOL_FIELDS = ("skip_unreadable", "log_to_file")
_STR_FIELDS = ("encoding", "log_level", "log_dir", "dock_area")
_SET_FIELDS = ("include_extensions", "exclude_dirs")


def _split_list(value: str) -> FrozenSet[str]:
    return frozenset(item.strip() for item in value.split(",") if item.strip())


def _normalize_extensions(values: Iterable[str]) -> FrozenSet[str]:
    normalized = set()
    for value in values:
        value = str(value).strip().lower()
        if not value:
            continue
        normalized.add(value if value.startswith(".") else f".{value}")
    return frozenset(normalized)


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclass
class PanelConfig:
    """Settings for scanning, logging and docking."""

    # Fichiers scannés
    include_extensions: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXTENSIONS)
    exclude_dirs: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXCLUDED_DIRS)
    max_file_bytes: int = 1024 * 1024
    encoding: str = "utf-8"
    skip_unreadable: bool = True

    # Nombre de threads pour un scan de projet
    scan_workers: int = 4

    # Logs
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False

    # Position du panneau dans la fenêtre hôte
    dock_area: str = "right"

    def __post_init__(self) -> None:
        self._check_types()
        self.include_extensions = _normalize_extensions(self.include_extensions)
        self.exclude_dirs = frozenset(self.exclude_dirs)
        self.log_level = str(self.log_level).upper()
        self.dock_area = str(self.dock_area).lower()
        self.validate()

    def _check_types(self) -> None:
        # Les valeurs YAML ne sont pas typées
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be true or false, got {value!r}")
        for name in _STR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        for name in _SET_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (list, tuple, set, frozenset)):
                raise ConfigError(f"{name} must be a list, got {value!r}")

    def validate(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigError(f"Unknown encoding: {self.encoding}") from exc
        if self.max_file_bytes <= 0:
            raise ConfigError("max_file_bytes must be positive")
        if self.scan_workers < 1:
            raise ConfigError("scan_workers must be at least 1")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")
        if self.dock_area not in _DOCK_AREAS:
            raise ConfigError(f"dock_area must be one of {sorted(_DOCK_AREAS)}")
        if not self.include_extensions:
            raise ConfigError("include_extensions cannot be empty")

    @classmethod
    def from_env(cls) -> "PanelConfig":
        """Build a configuration from ``TODOPANEL_*`` environment variables."""
        env = os.environ
        kwargs: Dict[str, Any] = {
            "max_file_bytes": _env_int(f"{ENV_PREFIX}MAX_FILE_BYTES", 1024 * 1024),
            "encoding": env.get(f"{ENV_PREFIX}ENCODING", "utf-8"),
            "skip_unreadable": _env_bool(f"{ENV_PREFIX}SKIP_UNREADABLE", True),
            "scan_workers": _env_int(f"{ENV_PREFIX}SCAN_WORKERS", 4),
            "log_level": env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
            "log_dir": env.get(f"{ENV_PREFIX}LOG_DIR", "logs"),
            "log_to_file": _env_bool(f"{ENV_PREFIX}LOG_TO_FILE", False),
            "dock_area": env.get(f"{ENV_PREFIX}DOCK_AREA", "right"),
        }
        if env.get(f"{ENV_PREFIX}EXTENSIONS"):
            kwargs["include_extensions"] = _split_list(env[f"{ENV_PREFIX}EXTENSIONS"])
        if env.get(f"{ENV_PREFIX}EXCLUDE_DIRS"):
            kwargs["exclude_dirs"] = _split_list(env[f"{ENV_PREFIX}EXCLUDE_DIRS"])
        return cls(**kwargs)

    def with_overrides(self, overrides: Dict[str, Any]) -> "PanelConfig":
        """Return a copy with ``overrides`` applied; unknown keys are rejected."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)

    def to_scan_config(self) -> ScanConfig:
        return ScanConfig(
            include_extensions=self.include_extensions,
            exclude_dirs=self.exclude_dirs,
            max_file_bytes=self.max_file_bytes,
            encoding=self.encoding,
            skip_unreadable=self.skip_unreadable,
            max_workers=self.scan_workers,
        )


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(content, dict):
        raise ConfigError("Configuration file root must be a mapping")
    return content


def load_config(path: Optional[os.PathLike | str] = None) -> PanelConfig:
    """Return the environment configuration, overlaid with ``path`` if given."""
    config = PanelConfig.from_env()
    if path is None:
        return config
    return config.with_overrides(_load_yaml(Path(path)))


# Instance globale par défaut
DEFAULT_PANEL_CONFIG = PanelConfig()
