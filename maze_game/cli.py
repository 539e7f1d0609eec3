"""
cli.py

Play:
  maze-game play --rows 15 --cols 15 --seed 42
  # Optional: --start "r,c" --end "r,c"

Show a verified maze with its route:
  maze-game show --rows 21 --cols 31 --seed 7
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, Tuple

from maze_game.errors import UnsolvableMazeError
from maze_game.game import MazeGame, render_board
from maze_game.generator import ORIGIN, MazeGenerator, default_end
from maze_game.grid import Grid, Point, PointLike
from maze_game.pathfinder import PathFinder, route_moves

logger = logging.getLogger(__name__)

# -------------------------
# Defaults
# -------------------------
DEF_ROWS = 15
DEF_COLS = 15
DEF_START = ORIGIN
LOG_FORMAT = "%(asctime)s : %(levelname)s : %(name)s : %(message)s"


def build_verified_maze(rows: int, cols: int, rng: random.Random,
                        start: Optional[PointLike] = None,
                        end: Optional[PointLike] = None) -> Tuple[Grid, Point, Point, List[Point]]:
    """Generate a maze and check start -> end; raises UnsolvableMazeError otherwise."""
    start = Point(*start) if start is not None else DEF_START
    end = Point(*end) if end is not None else default_end(rows, cols)

    grid = MazeGenerator(rng).generate(rows, cols, start=start, end=end)
    route = PathFinder(grid).find(start, end)
    if not route:
        raise UnsolvableMazeError(start, end)
    logger.info("Verified %dx%d maze: %s -> %s in %d steps",
                grid.rows, grid.cols, start, end, len(route) - 1)
    return grid, start, end, route


def _parse_point(parser: argparse.ArgumentParser, s: Optional[str], flag: str) -> Optional[Point]:
    if s is None:
        return None
    try:
        return Point.parse(s)
    except ValueError:
        parser.error(f"{flag} expects 'row,col', got {s!r}")


def _add_maze_args(p: argparse.ArgumentParser):
    p.add_argument("--rows", type=int, default=DEF_ROWS)
    p.add_argument("--cols", type=int, default=DEF_COLS)
    p.add_argument("--seed", type=int, default=None, help="RNG seed (default: OS entropy)")
    p.add_argument("--start", type=str, default=None, help="start 'r,c' (default 1,1)")
    p.add_argument("--end", type=str, default=None, help="end 'r,c' (default rows-2,cols-2)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maze-game", description="Generate, verify and play text mazes.")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_play = sub.add_parser("play", help="Play a freshly generated maze.")
    _add_maze_args(p_play)

    p_show = sub.add_parser("show", help="Print a generated maze with its route.")
    _add_maze_args(p_show)
    return parser


def main(argv: Optional[List[str]] = None, stdin=None, stdout=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.rows <= 0 or args.cols <= 0:
        parser.error("--rows and --cols must be positive")
    start = _parse_point(parser, args.start, "--start")
    end = _parse_point(parser, args.end, "--end")

    rng = random.Random(args.seed)
    try:
        grid, start, end, route = build_verified_maze(args.rows, args.cols, rng, start, end)
    except UnsolvableMazeError as e:
        logger.error("%s (seed=%s)", e, args.seed)
        print("Error: Generated maze is not solvable!", file=sys.stderr)
        return 1

    if args.cmd == "play":
        game = MazeGame(grid, start, end, stdin=stdin, stdout=stdout)
        game.play()

    elif args.cmd == "show":
        stdout.write(render_board(grid, start, end, route=route) + "\n")
        stdout.write(f"Route {start} -> {end}: {len(route) - 1} moves\n")
        stdout.write("".join(route_moves(route)).upper() + "\n")
        stdout.write(f"Signature: {grid.signature()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
