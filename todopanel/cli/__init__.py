"""Command-line interface for the TODO panel."""
