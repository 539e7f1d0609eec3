class MazeError(Exception):
    pass


class UnsolvableMazeError(MazeError):
    """No route between the requested endpoints; raised before play starts."""

    def __init__(self, start, end):
        super().__init__(f"Generated maze is not solvable from {start} to {end}")
        self.start = start
        self.end = end
