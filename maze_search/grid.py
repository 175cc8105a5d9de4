# -*- coding: utf-8 -*-
"""
Grid model: symbols, cell kinds and the mutable maze buffer.

Input symbols:
  'A' = start (exactly one)
  'B' = end (exactly one)
  '█' = wall ('#' is accepted and normalized to '█')
  ' ' = open floor

Overlay symbols (output only):
  '*' = final path
  '@' = visited (expanded) cell, only when requested
"""

from __future__ import annotations
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

from .errors import EndNotFound, InvalidCharacter, StartNotFound

Coord = Tuple[int, int]  # (row, col)

START_SYMBOL = "A"
END_SYMBOL = "B"
WALL_SYMBOL = "█"
ALT_WALL_SYMBOL = "#"
OPEN_SYMBOL = " "
VISITED_SYMBOL = "@"
PATH_SYMBOL = "*"

INPUT_SYMBOLS = frozenset((START_SYMBOL, END_SYMBOL, WALL_SYMBOL, OPEN_SYMBOL))

# up, left, down, right: traversal and tie-break order for every algorithm
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))

T = TypeVar("T")


class Cell(Enum):
    WALL = "wall"
    OPEN = "open"
    START = "start"
    END = "end"
    VISITED = "visited"
    PATH = "path"
    ACTIVE = "active"  # DFS frame still on the stack; never rendered

    @property
    def symbol(self) -> str:
        if self is Cell.ACTIVE:
            raise ValueError("ACTIVE cells have no output symbol")
        return _CELL_TO_SYMBOL[self]

    @classmethod
    def from_symbol(cls, ch: str) -> "Cell":
        try:
            return _SYMBOL_TO_CELL[ch]
        except KeyError:
            raise InvalidCharacter(ch) from None


_CELL_TO_SYMBOL = {
    Cell.WALL: WALL_SYMBOL,
    Cell.OPEN: OPEN_SYMBOL,
    Cell.START: START_SYMBOL,
    Cell.END: END_SYMBOL,
    Cell.VISITED: VISITED_SYMBOL,
    Cell.PATH: PATH_SYMBOL,
}

# Only input symbols parse; '@' and '*' are output-only.
_SYMBOL_TO_CELL = {
    START_SYMBOL: Cell.START,
    END_SYMBOL: Cell.END,
    WALL_SYMBOL: Cell.WALL,
    OPEN_SYMBOL: Cell.OPEN,
}


# =========================
# Text -> rows
# =========================
def parse_rows(text: str) -> List[List[str]]:
    """
    Split maze text into a list of symbol rows.
    Rows end at '\n' (or '\r\n'); no other character breaks a row, so form
    feeds, bare '\r' and unicode separators reach the validator as cells.
    '#' becomes '█'; everything else is kept for the validator to judge.
    """
    pieces = text.split("\n")
    tail = pieces.pop()  # text after the last '\n', '' when text ends with one
    lines = [p[:-1] if p.endswith("\r") else p for p in pieces]
    if tail:
        lines.append(tail)
    return [
        [WALL_SYMBOL if ch == ALT_WALL_SYMBOL else ch for ch in line]
        for line in lines
    ]


def locate(rows: Sequence[Sequence[T]], target: T) -> Optional[Coord]:
    """First (row, col) holding target, scanning row-major; None if absent."""
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value == target:
                return (r, c)
    return None


def neighbors4(rc: Coord) -> List[Coord]:
    """Up, left, down, right. May lie off the grid; callers bounds-check."""
    r, c = rc
    return [(r + dr, c + dc) for dr, dc in DIRECTIONS]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Maze:
    """Rectangular buffer of Cell values, mutated in place by one search run."""

    def __init__(self, cells: List[List[Cell]]):
        self.cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Maze":
        cells: List[List[Cell]] = []
        for r, row in enumerate(rows):
            out: List[Cell] = []
            for c, ch in enumerate(row):
                try:
                    out.append(Cell.from_symbol(ch))
                except InvalidCharacter:
                    raise InvalidCharacter(ch, (r, c)) from None
            cells.append(out)
        return cls(cells)

    @classmethod
    def from_text(cls, text: str) -> "Maze":
        return cls.from_rows(parse_rows(text))

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def __getitem__(self, rc: Coord) -> Cell:
        r, c = rc
        return self.cells[r][c]

    def __setitem__(self, rc: Coord, value: Cell) -> None:
        r, c = rc
        self.cells[r][c] = value

    def in_bounds(self, rc: Coord) -> bool:
        r, c = rc
        return 0 <= r < self.height and 0 <= c < len(self.cells[r])

    def passable_neighbors(self, rc: Coord) -> Iterator[Coord]:
        """In-bounds, non-wall neighbors in up/left/down/right order."""
        for nxt in neighbors4(rc):
            if self.in_bounds(nxt) and self[nxt] is not Cell.WALL:
                yield nxt

    def locate(self, kind: Cell) -> Optional[Coord]:
        return locate(self.cells, kind)

    def locate_start_end(self) -> Tuple[Coord, Coord]:
        start = self.locate(Cell.START)
        if start is None:
            raise StartNotFound()
        end = self.locate(Cell.END)
        if end is None:
            raise EndNotFound()
        return start, end

    def copy(self) -> "Maze":
        return Maze([row[:] for row in self.cells])

    def count(self, kind: Cell) -> int:
        return sum(row.count(kind) for row in self.cells)
