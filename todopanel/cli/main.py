"""Command-line entry point for todopanel-cli."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from todoscan.core.counting import count_by_kind, filter_by_kind
from todoscan.core.types import TodoEntry, TodoKind
from todoscan.errors import TextRetrievalError
from todoscan.loaders import FileSystemTextSource

from ..config import load_config
from ..errors import ConfigError
from ..lifecycle import create_panel_environment, shutdown_panel
from ..logging.safe_logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todopanel-cli",
        description="List TODO/FIXME comments of a project.",
    )
    parser.add_argument("--root", "-r", type=Path, required=True, help="Project directory or single file to scan.")
    parser.add_argument("--format", "-f", choices=("text", "json"), default="text", help="Output format.")
    parser.add_argument("--kind", "-k", choices=("todo", "fixme"), help="Only list annotations of this kind.")
    parser.add_argument("--output", "-o", type=Path, help="Output file (stdout if omitted).")
    parser.add_argument("--config", "-c", type=Path, help="YAML configuration file.")
    return parser


def render_text(entries: List[TodoEntry]) -> str:
    counts = count_by_kind(entries)
    lines = [
        f"{entry.display_location()}: {entry.kind.label} {entry.message}" for entry in entries
    ]
    lines.append(f"TODOs {counts.todo}, FIXMEs {counts.fixme}")
    return "\n".join(lines)


def render_json(root: Path, entries: List[TodoEntry]) -> str:
    payload = {
        "root": str(root),
        "counts": count_by_kind(entries).as_dict(),
        "entries": [entry.to_dict() for entry in entries],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.root.exists():
        parser.error(f"Scan root not found: {args.root}")
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))

    configure_logging(config)

    environment = create_panel_environment(
        FileSystemTextSource(args.root, config.to_scan_config()),
        config=config,
    )
    coordinator = environment.todos
    try:
        coordinator.refresh()
        entries = list(coordinator.state.entries)
    except TextRetrievalError as exc:
        print(f"Scan failed: {exc}", file=sys.stderr)
        return 1
    finally:
        shutdown_panel(environment)

    if args.kind:
        entries = filter_by_kind(entries, TodoKind(args.kind))

    if args.format == "json":
        serialized = render_json(args.root, entries)
    else:
        serialized = render_text(entries)

    if args.output:
        args.output.write_text(serialized + "\n", encoding="utf-8")
    else:
        print(serialized)

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(cli())
