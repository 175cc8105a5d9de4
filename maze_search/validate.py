# -*- coding: utf-8 -*-
"""
Well-formedness checks run before any search.

Checks, first failure wins:
  1. EmptyGrid        no rows
  2. MangledRows      a row differs in length from the first row
  3. StartNotFound    no 'A'
  4. EndNotFound      no 'B'
  5. InvalidCharacter a symbol outside {'A', 'B', '█', ' '}
  6. DuplicateStart   more than one 'A'
  7. DuplicateEnd     more than one 'B'
"""

from typing import Sequence

from .errors import (
    DuplicateEnd,
    DuplicateStart,
    EmptyGrid,
    EndNotFound,
    InvalidCharacter,
    MangledRows,
    StartNotFound,
)
from .grid import END_SYMBOL, INPUT_SYMBOLS, START_SYMBOL, Maze, locate, parse_rows


def validate_rows(rows: Sequence[Sequence[str]]) -> None:
    """Raise the first applicable MazeError; return None for a usable grid."""
    if len(rows) == 0:
        raise EmptyGrid()

    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise MangledRows(r, width, len(row))

    start = locate(rows, START_SYMBOL)
    if start is None:
        raise StartNotFound()
    end = locate(rows, END_SYMBOL)
    if end is None:
        raise EndNotFound()

    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch not in INPUT_SYMBOLS:
                raise InvalidCharacter(ch, (r, c))

    _check_unique(rows, START_SYMBOL, start, DuplicateStart)
    _check_unique(rows, END_SYMBOL, end, DuplicateEnd)


def _check_unique(rows, symbol, first, error_cls) -> None:
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == symbol and (r, c) != first:
                raise error_cls((r, c))


def load_maze(text: str) -> Maze:
    """Parse, validate and build the maze buffer for one run."""
    rows = parse_rows(text)
    validate_rows(rows)
    return Maze.from_rows(rows)
