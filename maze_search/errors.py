# -*- coding: utf-8 -*-
"""
Error kinds raised before or around a search.

"No path" is not an error: the search returns a negative result instead.
"""

from typing import Optional, Tuple


class MazeError(ValueError):
    """Base class for every terminal maze error."""


class InvalidAlgorithm(MazeError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown algorithm {token!r} (expected one of: A*, BFS, DFS, GBFS)")


class MazeFileNotFound(MazeError, FileNotFoundError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"cannot read maze file: {path}")


class EmptyGrid(MazeError):
    def __init__(self):
        super().__init__("maze has no rows")


class MangledRows(MazeError):
    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        super().__init__(f"row {row} has length {actual}, expected {expected}")


class StartNotFound(MazeError):
    def __init__(self):
        super().__init__("maze has no start cell 'A'")


class EndNotFound(MazeError):
    def __init__(self):
        super().__init__("maze has no end cell 'B'")


class InvalidCharacter(MazeError):
    def __init__(self, char: str, coord: Optional[Tuple[int, int]] = None):
        self.char = char
        self.coord = coord
        where = f" at {coord}" if coord is not None else ""
        super().__init__(f"invalid character {char!r}{where}")


class DuplicateStart(MazeError):
    def __init__(self, coord: Tuple[int, int]):
        self.coord = coord
        super().__init__(f"second start cell 'A' at {coord}")


class DuplicateEnd(MazeError):
    def __init__(self, coord: Tuple[int, int]):
        self.coord = coord
        super().__init__(f"second end cell 'B' at {coord}")
