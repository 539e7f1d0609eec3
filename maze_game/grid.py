"""
grid.py

Cell grid shared by the generator, the path finder and the game.
Row increases downward, col increases rightward.
"""

import hashlib
from typing import NamedTuple, Tuple, Union

import numpy as np

WALL = 1
PATH = 0


class Point(NamedTuple):
    row: int
    col: int

    def __str__(self):
        return f"({self.row}, {self.col})"

    @classmethod
    def parse(cls, s: str) -> "Point":
        """Parse 'r,c' into a Point."""
        parts = s.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,col', got {s!r}")
        r, c = parts
        return cls(int(r), int(c))


PointLike = Union[Point, Tuple[int, int]]


class Grid:
    """
    Read-only view over a 2-D uint8 array of WALL / PATH cells.

    The array passed in is frozen (writeable=False); build it fully
    before wrapping it.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {cells.shape}")
        cells.flags.writeable = False
        self._cells = cells

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def contains(self, p: PointLike) -> bool:
        r, c = p
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, p: PointLike) -> bool:
        return self[p] == WALL

    def is_path(self, p: PointLike) -> bool:
        return self[p] == PATH

    def __getitem__(self, p: PointLike) -> int:
        r, c = p
        if not self.contains((r, c)):
            raise IndexError(f"{Point(r, c)} outside {self.rows}x{self.cols} grid")
        return int(self._cells[r, c])

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def signature(self) -> str:
        h = hashlib.sha256(f"{self.rows}x{self.cols}:".encode("ascii"))
        h.update(np.ascontiguousarray(self._cells, dtype=np.uint8).tobytes())
        return h.hexdigest()

    @classmethod
    def from_strings(cls, lines, wall: str = "#") -> "Grid":
        """Build a grid from text rows, `wall` marking walls and anything else open."""
        rows = list(lines)
        if not rows or len({len(line) for line in rows}) != 1:
            raise ValueError("Rows must be non-empty and of equal length")
        cells = np.array([[WALL if ch == wall else PATH for ch in line] for line in rows],
                         dtype=np.uint8)
        return cls(cells)
