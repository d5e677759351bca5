"""Project-wide scanning pipeline."""

from .project_scan import ProjectScanner
from .result import ProjectScanResult

__all__ = ["ProjectScanResult", "ProjectScanner"]
