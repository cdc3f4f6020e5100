"""Command-line interface for polypath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FilePath
from typing import Any, List, Optional

from polypath.dsl.loader import load_paths_yaml
from polypath.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from polypath.model.path import Path

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this, ending them with "..."

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(row[col_idx]) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _print_points(path_string: str) -> None:
    """Print the point sequence of a path string as JSON."""
    try:
        path = Path(path_string)
    except ValueError as e:
        logger.error(f"Failed to parse path string {path_string!r}: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    logger.debug("Parsed %d points from %r", len(path), path_string)
    print(json.dumps([list(point) for point in path]))


def _print_path_string(points_json: str) -> None:
    """Print the canonical path string for a JSON list of points."""
    try:
        points = json.loads(points_json)
        path = Path(points)
    except ValueError as e:
        logger.error(f"Failed to build path from points: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    print(path.to_string())


def _inspect_paths(file: FilePath, detail: bool = False) -> None:
    """Load a path document, validate every entry, and print a summary table.

    Args:
        file: Path document YAML file.
        detail: Print every point of every path after the table.
    """
    logger.info(f"Inspecting paths from: {file}")

    try:
        paths = load_paths_yaml(file.read_text())
    except FileNotFoundError:
        logger.error(f"Path file not found: {file}")
        print(f"❌ ERROR: Path file not found: {file}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect paths: {type(e).__name__}: {e}")
        print("❌ ERROR: Failed to inspect paths")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    if not paths:
        print("No paths defined")
        return

    rows = [
        [name, str(len(path)), "yes" if path.closed else "no", path.to_string()]
        for name, path in paths.items()
    ]
    print(
        _format_table(
            ["Name", "Points", "Closed", "Path"], rows, max_col_width=60
        )
    )

    if detail:
        for name, path in paths.items():
            print(f"\n{name}:")
            for index, (x, y) in enumerate(path):
                print(f"   {index:>4}: ({x}, {y})")

    logger.info(f"Inspected {len(paths)} path{'s' if len(paths) != 1 else ''}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``polypath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="polypath",
        description="Parse, normalize, and inspect integer 2D paths.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{points,format,inspect}",
        help="Available commands",
    )

    points_parser = subparsers.add_parser(
        "points", help="Print the points of a path string as JSON"
    )
    points_parser.add_argument(
        "path_string", help='Path string, e.g. "M100 100 l0 100 z"'
    )

    format_parser = subparsers.add_parser(
        "format", help="Print the canonical path string for a JSON point list"
    )
    format_parser.add_argument(
        "points", help='JSON list of points, e.g. "[[0, 0], [10, 0]]"'
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate and summarize a YAML path document"
    )
    inspect_parser.add_argument("file", type=FilePath, help="Path document YAML")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Also list every point of every path",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "points":
        _print_points(args.path_string)
    elif args.command == "format":
        _print_path_string(args.points)
    elif args.command == "inspect":
        _inspect_paths(args.file, args.detail)


if __name__ == "__main__":
    main()
