# -*- coding: utf-8 -*-
"""
Command line entry point.

Usage:
  maze-search maze.txt BFS false
  maze-search maze.txt "A*" true --stats --png astar.png
  maze-search maze.txt GBFS false --compare --csv metrics.csv

The annotated grid is written to stdout; metrics and status lines go to
stderr. Exit status: 0 on a completed search (path found or not), 1 on a
maze error, 2 on bad arguments.
"""

import argparse
import sys
from typing import List, Optional

from .errors import MazeError, MazeFileNotFound
from .overlay import build_overlay_text, render_text
from .report import metrics_row, print_table, run_all, write_csv
from .search import parse_algorithm, solve
from .validate import load_maze


def parse_bool(token: str) -> bool:
    """Strict boolean literal: exactly 'true' or 'false'."""
    if token == "true":
        return True
    if token == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected 'true' or 'false', got {token!r}")


def read_maze(path: str) -> str:
    try:
        # newline="" keeps bare "\r" in the text for the validator to reject
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        raise MazeFileNotFound(path) from None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="maze-search",
        description="Solve a text maze with DFS, BFS, greedy best-first or A*",
    )
    parser.add_argument("source", help="maze file: 'A' start, 'B' end, '█' or '#' wall, ' ' open")
    parser.add_argument("algorithm", help="one of: A*, BFS, DFS, GBFS")
    parser.add_argument(
        "display_visited",
        type=parse_bool,
        help="'true' to mark every visited cell with '@', 'false' otherwise",
    )
    parser.add_argument("--stats", action="store_true", help="print path length, nodes expanded and max frontier")
    parser.add_argument("--compare", action="store_true", help="also run every algorithm and print a metrics table")
    parser.add_argument("--csv", type=str, default=None, help="write the metrics table to this CSV file")
    parser.add_argument("--output", type=str, default=None, help="save the overlay text (with legend) to this file")
    parser.add_argument("--png", type=str, default=None, help="save a PNG rendering of the solved maze")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    # unknown algorithm tokens fail before the file is touched
    algorithm = parse_algorithm(args.algorithm)
    maze = load_maze(read_maze(args.source))
    pristine = maze.copy()

    result = solve(maze, algorithm, args.display_visited)
    sys.stdout.write(render_text(maze))
    if not result.found:
        print(f"[Warn] {result.algorithm}: no path from A to B", file=sys.stderr)

    rows = [metrics_row(result)]
    if args.stats:
        print("\n[Search Metrics]", file=sys.stderr)
        print_table(rows, out=sys.stderr)

    if args.compare:
        rows = [metrics_row(r) for r, _ in run_all(pristine, args.display_visited)]
        print("\n[Search Metrics: all algorithms]", file=sys.stderr)
        print_table(rows, out=sys.stderr)

    if args.csv:
        write_csv(rows, args.csv)
        print(f"Saved CSV: {args.csv}", file=sys.stderr)

    if args.output:
        title = f"{result.algorithm} Overlay (steps={result.path_length})"
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(build_overlay_text(maze, title))
        print(f"Saved Overlay: {args.output}", file=sys.stderr)

    if args.png:
        from .plot import render_png

        render_png(maze, args.png, title=f"{result.algorithm} | steps={result.path_length}")
        print(f"Saved PNG: {args.png}", file=sys.stderr)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except MazeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
