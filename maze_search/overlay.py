# -*- coding: utf-8 -*-
"""
Path annotation and text rendering of a searched maze.
"""

from typing import Iterable, List

from .grid import Cell, Coord, Maze, PATH_SYMBOL, VISITED_SYMBOL

_PROTECTED = (Cell.START, Cell.END)


def annotate_path(maze: Maze, path: Iterable[Coord]) -> None:
    """Mark every path cell as PATH in place. Start and End are never overwritten."""
    for rc in path:
        if maze[rc] not in _PROTECTED:
            maze[rc] = Cell.PATH


def render_lines(maze: Maze) -> List[str]:
    return ["".join(cell.symbol for cell in row) for row in maze.cells]


def render_text(maze: Maze) -> str:
    """Serialize the maze, one newline-terminated line per row."""
    return "".join(line + "\n" for line in render_lines(maze))


def build_overlay_text(maze: Maze, title: str) -> str:
    """
    Rendered maze with a title and legend header, used for saved overlay files.
    """
    header = [
        title,
        f"Legend: '{PATH_SYMBOL}'=final path, '{VISITED_SYMBOL}'=visited, "
        f"'{Cell.START.symbol}'=start, '{Cell.END.symbol}'=end, '{Cell.WALL.symbol}'=wall",
        "-" * 80,
    ]
    return "\n".join(header) + "\n" + render_text(maze)
