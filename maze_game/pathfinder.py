"""
pathfinder.py

Depth-first reachability search over a Grid. Finds *a* route, not the
shortest; neighbours are always tried right, down, left, up so the route
is reproducible for a given grid.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from maze_game.grid import Grid, Point, PointLike

logger = logging.getLogger(__name__)

# right, down, left, up
SEARCH_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))

# (dr, dc) -> key the game uses for that move
MOVE_KEYS = {(-1, 0): 'w', (0, -1): 'a', (1, 0): 's', (0, 1): 'd'}


class PathFinder:
    def __init__(self, grid: Grid):
        self.grid = grid
        self.visited: Optional[np.ndarray] = None

    def _open(self, p: Point) -> bool:
        if not self.grid.contains(p):
            return False
        return self.grid.is_path(p) and not self.visited[p.row, p.col]

    def find(self, start: PointLike, end: PointLike) -> List[Point]:
        """
        Return a route from `start` to `end` inclusive, or [] when there is none.

        Out-of-range endpoints are simply unreachable.
        """
        start, end = Point(*start), Point(*end)
        self.visited = np.zeros(self.grid.shape, dtype=bool)

        if not self._open(start):
            return []
        if start == end:
            return [start]

        self.visited[start.row, start.col] = True
        # The stack is always the chain of cells from start to the current cell.
        stack = [(start, iter(SEARCH_STEPS))]
        while stack:
            cur, pending = stack[-1]
            for dr, dc in pending:
                nxt = Point(cur.row + dr, cur.col + dc)
                if not self._open(nxt):
                    continue
                if nxt == end:
                    route = [p for p, _ in stack]
                    route.append(end)
                    logger.debug("Route %s -> %s found, %d cells", start, end, len(route))
                    return route
                self.visited[nxt.row, nxt.col] = True
                stack.append((nxt, iter(SEARCH_STEPS)))
                break
            else:
                stack.pop()

        logger.debug("No route %s -> %s", start, end)
        return []

    def is_solvable(self, start: PointLike, end: PointLike) -> bool:
        return bool(self.find(start, end))


def find_path(grid: Grid, start: PointLike, end: PointLike) -> List[Point]:
    return PathFinder(grid).find(start, end)


def route_moves(route: Sequence[PointLike]) -> List[str]:
    """Map each step of a route to its w/a/s/d key."""
    moves = []
    for (r0, c0), (r1, c1) in zip(route, route[1:]):
        step = (r1 - r0, c1 - c0)
        if step not in MOVE_KEYS:
            raise ValueError(f"Non-adjacent step: {step}")
        moves.append(MOVE_KEYS[step])
    return moves
