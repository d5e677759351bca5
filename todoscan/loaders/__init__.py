"""
Text sources feeding the scanner with ``(file_id, text)`` pairs.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Protocol, Tuple, runtime_checkable

from ..core.config import ScanConfig
from ..errors import TextRetrievalError

logger = logging.getLogger(__name__)

TextPair = Tuple[str, str]


@runtime_checkable
class TextSource(Protocol):
    """Supplies the full text of every file in scope."""

    def iter_texts(self) -> Iterable[TextPair]:
        """Yield ``(file_id, text)`` pairs in a stable order."""


class InMemoryTextSource:
    """Buffers held in memory, yielded in insertion order."""

    def __init__(self, buffers: Mapping[str, str] | Iterable[TextPair]) -> None:
        items = buffers.items() if isinstance(buffers, Mapping) else buffers
        self._buffers = [(str(file_id), text) for file_id, text in items]

    def iter_texts(self) -> Iterator[TextPair]:
        return iter(list(self._buffers))

    def __len__(self) -> int:
        return len(self._buffers)


class FileSystemTextSource:
    """
    Reads source files below a root directory (or a single file).

    Files are visited in sorted order; ids are POSIX paths relative to the
    root so that results are stable across platforms.
    """

    def __init__(self, root: os.PathLike | str, config: Optional[ScanConfig] = None) -> None:
        self.root = Path(root)
        self.config = config or ScanConfig()

    def iter_paths(self) -> Iterator[Path]:
        if not self.root.exists():
            raise TextRetrievalError(f"Scan root not found: {self.root}")

        if self.root.is_file():
            yield self.root
            return

        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = sorted(d for d in dirnames if d not in self.config.exclude_dirs)
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if self.config.accepts_suffix(path.suffix):
                    yield path

    def iter_texts(self) -> Iterator[TextPair]:
        for path in self.iter_paths():
            text = self._read(path)
            if text is not None:
                yield self._file_id(path), text

    def _file_id(self, path: Path) -> str:
        if self.root.is_file():
            return path.name
        return path.relative_to(self.root).as_posix()

    def _read(self, path: Path) -> Optional[str]:
        try:
            size = path.stat().st_size
            if size > self.config.max_file_bytes:
                logger.debug("Skipping %s (%d bytes over limit)", path, size)
                return None
            return path.read_text(encoding=self.config.encoding, errors="replace")
        except LookupError as exc:
            raise TextRetrievalError(f"Unknown encoding {self.config.encoding!r}", file_id=str(path)) from exc
        except OSError as exc:
            if self.config.skip_unreadable:
                logger.warning("Skipping unreadable file %s: %s", path, exc)
                return None
            raise TextRetrievalError(f"Cannot read {path}: {exc}", file_id=str(path)) from exc


__all__ = [
    "FileSystemTextSource",
    "InMemoryTextSource",
    "TextPair",
    "TextSource",
]
