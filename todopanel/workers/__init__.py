"""
TODO Panel Workers Package
==========================

QThread workers for background scans.
"""

from .scan_worker import ScanWorker

__all__ = ["ScanWorker"]
