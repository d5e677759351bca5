"""Reusable widgets for the TODO panel."""

from .counts_header import CountsHeader

__all__ = ["CountsHeader"]
