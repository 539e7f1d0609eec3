from maze_game.errors import MazeError, UnsolvableMazeError
from maze_game.generator import MazeGenerator, generate_maze
from maze_game.grid import PATH, WALL, Grid, Point
from maze_game.pathfinder import PathFinder, find_path, route_moves

__all__ = [
    "MazeError", "UnsolvableMazeError",
    "MazeGenerator", "generate_maze",
    "Grid", "Point", "WALL", "PATH",
    "PathFinder", "find_path", "route_moves",
]
