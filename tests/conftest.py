import random

import pytest

from maze_game.grid import Grid

# start (1,1), exit (3,3); one route: right, right, down, down
CORRIDOR = [
    "#####",
    "#   #",
    "### #",
    "#   #",
    "#####",
]

# (5,5) is open but walled in on all four sides
WALLED_END = [
    "#######",
    "#     #",
    "#     #",
    "#     #",
    "#    ##",
    "#   # #",
    "#######",
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def corridor():
    return Grid.from_strings(CORRIDOR)


@pytest.fixture
def walled_end():
    return Grid.from_strings(WALLED_END)


def assert_valid_route(grid, route, start, end):
    assert route[0] == start
    assert route[-1] == end
    assert len(set(route)) == len(route)
    for (r0, c0), (r1, c1) in zip(route, route[1:]):
        assert abs(r1 - r0) + abs(c1 - c0) == 1
    for p in route:
        assert grid.is_path(p)
