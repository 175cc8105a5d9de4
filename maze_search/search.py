# -*- coding: utf-8 -*-
"""
Maze search strategies (4-connected grid, unit steps)
-----------------------------------------------------
- DFS                 explicit stack, neighbor order up/left/down/right
- BFS                 FIFO queue, shortest path in steps
- Greedy Best-First   heap on Manhattan distance to the end, not optimal
- A*                  heap on g + Manhattan distance, shortest path in steps

Every strategy takes (maze, start, end, display_visited), mutates the maze in
place and returns a SearchResult:
  - on success each path cell except Start/End becomes Cell.PATH
  - with display_visited each processed cell (not Start/End) becomes
    Cell.VISITED, unless it ends up on the path
  - no path is a normal negative result, not an exception

Heap tie-break (GBFS, A*): equal keys pop the larger row first, then the
larger column.
"""

from __future__ import annotations
import heapq
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from .errors import InvalidAlgorithm
from .grid import Cell, Coord, Maze, manhattan, neighbors4
from .overlay import annotate_path


@dataclass
class SearchResult:
    algorithm: str
    found: bool
    path: List[Coord] = field(default_factory=list)  # after Start, up to and including End
    nodes_expanded: int = 0
    max_frontier: int = 0
    # cells taken off the frontier (entered, for DFS), Start and a reached End included
    expanded: Set[Coord] = field(default_factory=set)

    @property
    def path_length(self) -> int:
        """Steps from Start to End; 0 when no path was found."""
        return len(self.path) if self.found else 0


class Algorithm(Enum):
    ASTAR = "A*"
    BFS = "BFS"
    DFS = "DFS"
    GREEDY = "GBFS"


def parse_algorithm(token: str) -> Algorithm:
    """Exact, case-sensitive match on 'A*', 'BFS', 'DFS' or 'GBFS'."""
    try:
        return Algorithm(token)
    except ValueError:
        raise InvalidAlgorithm(token) from None


# =========================
# Shared helpers
# =========================
def reconstruct_path(
    came_from: Dict[Coord, Optional[Coord]], start: Coord, goal: Coord
) -> List[Coord]:
    """
    Walk parent pointers back from goal. The result excludes start and ends
    with goal; empty if goal was never reached.
    """
    if goal not in came_from:
        return []
    path: List[Coord] = []
    cur: Optional[Coord] = goal
    while cur is not None and cur != start:
        path.append(cur)
        cur = came_from[cur]
    path.reverse()
    return path


def _mark_visited(maze: Maze, rc: Coord, display_visited: bool) -> None:
    if display_visited and maze[rc] not in (Cell.START, Cell.END):
        maze[rc] = Cell.VISITED


def _heap_key(priority: int, rc: Coord) -> Tuple[int, int, int]:
    return (priority, -rc[0], -rc[1])


def _heap_coord(entry: Tuple[int, int, int]) -> Coord:
    return (-entry[1], -entry[2])


def _succeed(
    maze: Maze,
    label: str,
    came_from: Dict[Coord, Optional[Coord]],
    start: Coord,
    end: Coord,
    expanded: Set[Coord],
    max_frontier: int,
) -> SearchResult:
    path = reconstruct_path(came_from, start, end)
    annotate_path(maze, path)
    return SearchResult(label, True, path, len(expanded), max_frontier, expanded)


# =========================
# Strategies
# =========================
def dfs(maze: Maze, start: Coord, end: Coord, display_visited: bool = False) -> SearchResult:
    """
    Depth-first walk with an explicit stack of (cell, pending neighbors)
    frames. Cells on the stack hold Cell.ACTIVE. A frame that runs out of
    neighbors is popped and reverts to OPEN (or VISITED when displaying
    visited cells). When End is reached every frame still on the stack is
    the path.
    """
    seen = {start}
    stack: List[Tuple[Coord, Iterator[Coord]]] = [(start, iter(neighbors4(start)))]
    max_frontier = 1

    while stack:
        current, pending = stack[-1]
        for nxt in pending:
            if not maze.in_bounds(nxt) or maze[nxt] is Cell.WALL or nxt in seen:
                continue
            if nxt == end:
                seen.add(end)
                path = [rc for rc, _ in stack[1:]] + [end]
                annotate_path(maze, path)
                return SearchResult(Algorithm.DFS.value, True, path, len(seen), max_frontier, seen)
            seen.add(nxt)
            maze[nxt] = Cell.ACTIVE
            stack.append((nxt, iter(neighbors4(nxt))))
            max_frontier = max(max_frontier, len(stack))
            break
        else:
            stack.pop()
            if current != start:
                maze[current] = Cell.VISITED if display_visited else Cell.OPEN

    return SearchResult(Algorithm.DFS.value, False, [], len(seen), max_frontier, seen)


def bfs(maze: Maze, start: Coord, end: Coord, display_visited: bool = False) -> SearchResult:
    """
    BFS: FIFO queue. A cell is claimed when first enqueued, so each cell is
    queued once and its parent is the one that discovered it.
    """
    frontier = deque([start])
    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    expanded: Set[Coord] = set()
    max_frontier = 1

    while frontier:
        max_frontier = max(max_frontier, len(frontier))
        current = frontier.popleft()
        expanded.add(current)

        if current == end:
            return _succeed(maze, Algorithm.BFS.value, came_from, start, end,
                            expanded, max_frontier)

        _mark_visited(maze, current, display_visited)

        for nxt in maze.passable_neighbors(current):
            if nxt not in came_from:
                came_from[nxt] = current
                frontier.append(nxt)

    return SearchResult(Algorithm.BFS.value, False, [], len(expanded), max_frontier, expanded)


def greedy_best_first(
    maze: Maze, start: Coord, end: Coord, display_visited: bool = False
) -> SearchResult:
    """
    Greedy best-first: priority is h(n) = Manhattan distance to End only.
    The key is fixed when a cell is enqueued. Not optimal.
    """
    frontier = [_heap_key(manhattan(start, end), start)]
    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    expanded: Set[Coord] = set()
    max_frontier = 1

    while frontier:
        max_frontier = max(max_frontier, len(frontier))
        current = _heap_coord(heapq.heappop(frontier))
        expanded.add(current)

        if current == end:
            return _succeed(maze, Algorithm.GREEDY.value, came_from, start, end,
                            expanded, max_frontier)

        _mark_visited(maze, current, display_visited)

        for nxt in maze.passable_neighbors(current):
            if nxt not in came_from:
                came_from[nxt] = current
                heapq.heappush(frontier, _heap_key(manhattan(nxt, end), nxt))

    return SearchResult(Algorithm.GREEDY.value, False, [], len(expanded), max_frontier, expanded)


def a_star(maze: Maze, start: Coord, end: Coord, display_visited: bool = False) -> SearchResult:
    """
    A*: f(n) = g(n) + h(n), g = steps from Start, h = Manhattan distance.
    Manhattan is admissible and consistent on a 4-connected unit grid, so the
    first time End is popped its path is a shortest one.

    A cheaper route to a queued cell pushes it again; the stale entry is
    skipped when popped, so each cell is expanded once.
    """
    frontier = [_heap_key(manhattan(start, end), start)]
    came_from: Dict[Coord, Optional[Coord]] = {start: None}
    g_cost: Dict[Coord, int] = {start: 0}
    expanded: Set[Coord] = set()
    max_frontier = 1

    while frontier:
        max_frontier = max(max_frontier, len(frontier))
        current = _heap_coord(heapq.heappop(frontier))
        if current in expanded:
            continue
        expanded.add(current)

        if current == end:
            return _succeed(maze, Algorithm.ASTAR.value, came_from, start, end,
                            expanded, max_frontier)

        _mark_visited(maze, current, display_visited)

        for nxt in maze.passable_neighbors(current):
            new_g = g_cost[current] + 1
            if nxt not in g_cost or new_g < g_cost[nxt]:
                g_cost[nxt] = new_g
                came_from[nxt] = current
                heapq.heappush(frontier, _heap_key(new_g + manhattan(nxt, end), nxt))

    return SearchResult(Algorithm.ASTAR.value, False, [], len(expanded), max_frontier, expanded)


Strategy = Callable[[Maze, Coord, Coord, bool], SearchResult]

ALGORITHMS: Dict[Algorithm, Strategy] = {
    Algorithm.DFS: dfs,
    Algorithm.BFS: bfs,
    Algorithm.GREEDY: greedy_best_first,
    Algorithm.ASTAR: a_star,
}


def solve(maze: Maze, algorithm: Algorithm, display_visited: bool = False) -> SearchResult:
    """Locate Start and End, then run the chosen strategy on the maze in place."""
    start, end = maze.locate_start_end()
    return ALGORITHMS[algorithm](maze, start, end, display_visited)
