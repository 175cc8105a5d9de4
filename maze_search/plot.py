# -*- coding: utf-8 -*-
"""
PNG rendering of an annotated maze (numpy array + matplotlib imshow).
"""

from typing import Optional

import numpy as np
import matplotlib
matplotlib.use("Agg")  # file output only, no display needed
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from .grid import Cell, Maze

FIGSIZE = (8, 8)
DPI = 180

# array code -> color, in code order
CELL_CODES = {
    Cell.WALL: 0,
    Cell.OPEN: 1,
    Cell.VISITED: 2,
    Cell.PATH: 3,
    Cell.START: 4,
    Cell.END: 5,
}
COLORS = ["#202634", "#F5F5F5", "#9EC5FE", "#FFD200", "#2E8B57", "#DC322F"]


def maze_to_array(maze: Maze) -> np.ndarray:
    A = np.zeros((maze.height, maze.width), dtype=np.uint8)
    for r, row in enumerate(maze.cells):
        for c, cell in enumerate(row):
            A[r, c] = CELL_CODES[cell]
    return A


def render_png(maze: Maze, out_png: str, title: Optional[str] = None) -> None:
    A = maze_to_array(maze)
    cmap = ListedColormap(COLORS)

    fig = plt.figure(figsize=FIGSIZE)
    plt.imshow(A, cmap=cmap, vmin=0, vmax=len(COLORS) - 1, interpolation="nearest")
    if title:
        plt.title(title)
    plt.xticks([])
    plt.yticks([])
    fig.savefig(out_png, bbox_inches="tight", dpi=DPI)
    plt.close(fig)
