"""Text maze solving with DFS, BFS, greedy best-first and A*."""

from .errors import (
    DuplicateEnd,
    DuplicateStart,
    EmptyGrid,
    EndNotFound,
    InvalidAlgorithm,
    InvalidCharacter,
    MangledRows,
    MazeError,
    MazeFileNotFound,
    StartNotFound,
)
from .grid import Cell, Coord, Maze, locate, manhattan, neighbors4, parse_rows
from .overlay import annotate_path, build_overlay_text, render_text
from .search import (
    ALGORITHMS,
    Algorithm,
    SearchResult,
    a_star,
    bfs,
    dfs,
    greedy_best_first,
    parse_algorithm,
    solve,
)
from .validate import load_maze, validate_rows

__version__ = "0.1.0"
