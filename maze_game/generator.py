"""
generator.py

Randomized depth-first carving ("recursive backtracker") on an odd-sized
cell grid. Passages live on odd coordinates; every move jumps two cells and
carves the wall in between.

    rng = random.Random(42)
    grid = MazeGenerator(rng).generate(15, 15)
"""

import logging
import random
from typing import Optional

import numpy as np

from maze_game.grid import PATH, WALL, Grid, Point, PointLike

logger = logging.getLogger(__name__)

# right, down, left, up; shuffled per cell
CARVE_STEPS = ((0, 2), (2, 0), (0, -2), (-2, 0))
ORIGIN = Point(1, 1)


def effective_size(n: int) -> int:
    """Round up to the nearest odd number."""
    if n <= 0:
        raise ValueError(f"Maze dimensions must be positive, got {n}")
    return n + 1 if n % 2 == 0 else n


def default_end(rows: int, cols: int) -> Point:
    return Point(effective_size(rows) - 2, effective_size(cols) - 2)


def _inside_border(r: int, c: int, rows: int, cols: int) -> bool:
    return 0 < r < rows - 1 and 0 < c < cols - 1


def carve_passages(cells: np.ndarray, rng: random.Random, origin: PointLike = ORIGIN) -> int:
    """
    Carve in place from `origin`. Returns the number of cells turned into PATH.

    Each stack frame holds the cell and an iterator over its remaining
    shuffled directions, so backtracking resumes exactly where a recursive
    carver would.
    """
    rows, cols = cells.shape
    carved = 0

    def enter(r, c):
        nonlocal carved
        if cells[r, c] == WALL:
            carved += 1
        cells[r, c] = PATH
        dirs = list(CARVE_STEPS)
        rng.shuffle(dirs)
        return r, c, iter(dirs)

    stack = [enter(*origin)]
    while stack:
        r, c, pending = stack[-1]
        for dr, dc in pending:
            nr, nc = r + dr, c + dc
            if _inside_border(nr, nc, rows, cols) and cells[nr, nc] == WALL:
                cells[r + dr // 2, c + dc // 2] = PATH
                carved += 1
                stack.append(enter(nr, nc))
                break
        else:
            stack.pop()
    return carved


class MazeGenerator:
    """Builds maze grids from a caller-supplied random source."""

    def __init__(self, rng: random.Random):
        self.rng = rng

    def generate(self, rows: int, cols: int,
                 start: Optional[PointLike] = None,
                 end: Optional[PointLike] = None) -> Grid:
        rows, cols = effective_size(rows), effective_size(cols)
        cells = np.full((rows, cols), WALL, dtype=np.uint8)

        carved = 0
        if _inside_border(ORIGIN.row, ORIGIN.col, rows, cols):
            carved = carve_passages(cells, self.rng)

        # Forced open even when carving never reached them.
        start = Point(*start) if start is not None else ORIGIN
        end = Point(*end) if end is not None else Point(rows - 2, cols - 2)
        for p in (start, end):
            if _inside_border(p.row, p.col, rows, cols):
                cells[p.row, p.col] = PATH
            else:
                logger.debug("Not forcing %s open: outside the interior of %dx%d", p, rows, cols)

        logger.debug("Generated %dx%d maze, %d cells carved", rows, cols, carved)
        return Grid(cells)


def generate_maze(rows: int, cols: int, rng: random.Random,
                  start: Optional[PointLike] = None,
                  end: Optional[PointLike] = None) -> Grid:
    return MazeGenerator(rng).generate(rows, cols, start=start, end=end)
