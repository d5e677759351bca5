"""
Configuration for project-wide scans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet


DEFAULT_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        ".c",
        ".cc",
        ".cpp",
        ".cs",
        ".css",
        ".cxx",
        ".go",
        ".h",
        ".hh",
        ".hpp",
        ".java",
        ".js",
        ".jsx",
        ".kt",
        ".php",
        ".rs",
        ".scala",
        ".swift",
        ".ts",
        ".tsx",
    }
)

DEFAULT_EXCLUDED_DIRS: FrozenSet[str] = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "__pycache__",
        "build",
        "dist",
        "node_modules",
        "target",
    }
)


@dataclass
class ScanConfig:
    """Settings used by text sources and the project scanner."""

    # Fichiers retenus
    include_extensions: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXTENSIONS)
    exclude_dirs: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXCLUDED_DIRS)
    max_file_bytes: int = 1024 * 1024

    # Lecture
    encoding: str = "utf-8"
    skip_unreadable: bool = True

    # Performance
    max_workers: int = 4

    def accepts_suffix(self, suffix: str) -> bool:
        return suffix.lower() in self.include_extensions
