"""Project-wide scan over a text source."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from ..core.extractor import TodoExtractor
from ..core.types import TodoEntry
from ..loaders import TextSource
from .result import ProjectScanResult

logger = logging.getLogger(__name__)


class ProjectScanner:
    """
    Scans every file supplied by a :class:`TextSource`.

    Files are independent, so they are handed to a thread pool; results are
    concatenated in the order the source yielded the files.
    """

    def __init__(self, extractor: Optional[TodoExtractor] = None, max_workers: int = 4) -> None:
        self.extractor = extractor or TodoExtractor()
        self.max_workers = max_workers

    def scan_source(self, source: TextSource) -> ProjectScanResult:
        start_time = time.time()
        # Retrieval errors raised while iterating propagate to the caller.
        pairs: List[Tuple[str, str]] = list(source.iter_texts())

        if self.max_workers <= 1 or len(pairs) <= 1:
            per_file = [self._scan_pair(pair) for pair in pairs]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                per_file = list(executor.map(self._scan_pair, pairs))

        entries: List[TodoEntry] = []
        for file_entries in per_file:
            entries.extend(file_entries)

        duration = time.time() - start_time
        logger.debug(
            "Scanned %d files in %.3fs (%d annotations)", len(pairs), duration, len(entries)
        )
        return ProjectScanResult(entries=entries, files_scanned=len(pairs), duration=duration)

    def _scan_pair(self, pair: Tuple[str, str]) -> List[TodoEntry]:
        file_id, text = pair
        return self.extractor.scan(text, file_id)
