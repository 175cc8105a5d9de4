# -*- coding: utf-8 -*-
"""
Side-by-side metrics for every strategy on one maze.

Metrics:
- Path Length (steps)  steps from Start to End (0 if no path)
- Nodes Expanded       cells taken off the frontier / entered by DFS
- Max Frontier Size    peak size of the queue, heap or stack
"""

import csv
import sys
from typing import List, TextIO, Tuple

from .grid import Maze
from .search import ALGORITHMS, SearchResult

HEADERS = [
    "Algorithm",
    "Path Length (steps)",
    "Nodes Expanded",
    "Max Frontier Size",
    "Found Path",
]


def run_all(maze: Maze, display_visited: bool = False) -> List[Tuple[SearchResult, Maze]]:
    """Run every strategy on its own copy of the maze; the input is left untouched."""
    results = []
    for strategy in ALGORITHMS.values():
        work = maze.copy()
        start, end = work.locate_start_end()
        results.append((strategy(work, start, end, display_visited), work))
    return results


def metrics_row(result: SearchResult) -> dict:
    return {
        "Algorithm": result.algorithm,
        "Path Length (steps)": result.path_length,
        "Nodes Expanded": result.nodes_expanded,
        "Max Frontier Size": result.max_frontier,
        "Found Path": result.found,
    }


def print_table(rows: List[dict], out: TextIO = sys.stdout) -> None:
    """Print rows as an aligned table; each row needs every key in HEADERS."""
    col_w = {h: len(h) for h in HEADERS}
    for r in rows:
        for h in HEADERS:
            col_w[h] = max(col_w[h], len(str(r[h])))

    print(" | ".join(f"{h:<{col_w[h]}}" for h in HEADERS), file=out)
    print("-+-".join("-" * col_w[h] for h in HEADERS), file=out)
    for r in rows:
        print(" | ".join(f"{str(r[h]):<{col_w[h]}}" for h in HEADERS), file=out)


def write_csv(rows: List[dict], out_csv: str) -> None:
    with open(out_csv, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=HEADERS)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)
