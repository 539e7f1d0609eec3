"""
game.py

Interactive text game on a verified maze. Reads one command per line,
so it can be driven by any pair of text streams.
"""

import logging
import sys
from typing import Iterable, Optional

import numpy as np

from maze_game.grid import Grid, Point, PointLike
from maze_game.pathfinder import MOVE_KEYS, PathFinder

logger = logging.getLogger(__name__)

WALL_CHAR = '#'
PATH_CHAR = ' '
PLAYER_CHAR = 'P'
EXIT_CHAR = 'E'
VISITED_CHAR = '.'

KEY_STEPS = {key: step for step, key in MOVE_KEYS.items()}
KEY_NAMES = {'w': 'up', 'a': 'left', 's': 'down', 'd': 'right'}

INSTRUCTIONS = """\
=== MAZE GAME ===
Find your way from the starting position (P) to the exit (E)
Controls:
  W or w: Move up
  A or a: Move left
  S or s: Move down
  D or d: Move right
  H or h: Hint (next step toward the exit)
  Q or q: Quit game
Legend:
  P: Player
  E: Exit
  #: Wall
  .: Visited path
  [space]: Unvisited path

Press Enter to start the game..."""


def render_board(grid: Grid, player: PointLike, exit: PointLike,
                 visited: Optional[np.ndarray] = None,
                 route: Optional[Iterable[PointLike]] = None) -> str:
    marked = np.zeros(grid.shape, dtype=bool) if visited is None else visited.copy()
    for r, c in route or ():
        marked[r, c] = True
    player, exit = Point(*player), Point(*exit)

    lines = []
    for r in range(grid.rows):
        out = []
        for c in range(grid.cols):
            if (r, c) == player:
                ch = PLAYER_CHAR
            elif (r, c) == exit:
                ch = EXIT_CHAR
            elif grid.is_wall((r, c)):
                ch = WALL_CHAR
            elif marked[r, c]:
                ch = VISITED_CHAR
            else:
                ch = PATH_CHAR
            out.append(ch + " ")
        lines.append("".join(out))
    return "\n".join(lines)


class MazeGame:
    def __init__(self, grid: Grid, start: PointLike, end: PointLike,
                 stdin=None, stdout=None):
        self.grid = grid
        self.player = Point(*start)
        self.exit = Point(*end)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.moves = 0
        self.won = False
        self.visited = np.zeros(grid.shape, dtype=bool)
        self.visited[self.player.row, self.player.col] = True

    def _say(self, text: str = "", end: str = "\n"):
        self.stdout.write(text + end)
        self.stdout.flush()

    def _read(self) -> Optional[str]:
        line = self.stdin.readline()
        if line == "":
            return None  # EOF
        return line.strip().lower()

    def display(self):
        self._say(f"\nMoves: {self.moves}")
        self._say(render_board(self.grid, self.player, self.exit, self.visited))

    def hint(self) -> Optional[str]:
        route = PathFinder(self.grid).find(self.player, self.exit)
        if len(route) < 2:
            return None
        step = (route[1].row - route[0].row, route[1].col - route[0].col)
        return MOVE_KEYS[step]

    def move(self, key: str) -> bool:
        """Apply a w/a/s/d move. Returns False if blocked."""
        dr, dc = KEY_STEPS[key]
        target = Point(self.player.row + dr, self.player.col + dc)
        if not self.grid.contains(target) or self.grid.is_wall(target):
            self._say("You can't move there! That's a wall or out of bounds.")
            return False
        self.player = target
        self.visited[target.row, target.col] = True
        self.moves += 1
        if self.player == self.exit:
            self.won = True
        return True

    def play(self) -> bool:
        """Run the game loop. Returns True if the exit was reached, False on quit."""
        self._say(INSTRUCTIONS)
        if self._read() is None:
            self._say("\nGame ended. Thanks for playing!")
            return False

        while not self.won:
            self.display()
            self._say("\nEnter your move (W/A/S/D, H for hint or Q to quit): ", end="")
            cmd = self._read()
            if cmd is None or cmd[:1] == 'q':
                logger.info("Player quit after %d moves", self.moves)
                self._say("\nGame ended. Thanks for playing!")
                return False
            key = cmd[:1]
            if key in KEY_STEPS:
                self.move(key)
            elif key == 'h':
                nxt = self.hint()
                if nxt is None:
                    self._say("No route to the exit from here.")
                else:
                    self._say(f"Hint: move {KEY_NAMES[nxt]} ({nxt.upper()})")
            else:
                self._say("Invalid move! Use W/A/S/D to move, H for a hint or Q to quit.")

        self.display()
        self._say(f"\nCongratulations! You reached the exit in {self.moves} moves!")
        logger.info("Player won in %d moves", self.moves)
        return True
