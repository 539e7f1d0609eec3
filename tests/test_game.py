import io

import numpy as np

from maze_game.game import MazeGame, render_board


def _play(grid, script, start=(1, 1), end=(3, 3)):
    out = io.StringIO()
    game = MazeGame(grid, start, end, stdin=io.StringIO(script), stdout=out)
    won = game.play()
    return game, won, out.getvalue()


def test_render_board(corridor):
    board = render_board(corridor, (1, 1), (3, 3))
    assert board.splitlines() == [
        "# # # # # ",
        "# P     # ",
        "# # #   # ",
        "#     E # ",
        "# # # # # ",
    ]


def test_render_board_marks_visited_and_route(corridor):
    visited = np.zeros(corridor.shape, dtype=bool)
    visited[1, 2] = True
    board = render_board(corridor, (1, 1), (3, 3), visited=visited, route=[(2, 3)])
    lines = board.splitlines()
    assert lines[1] == "# P .   # "
    assert lines[2] == "# # # . # "
    # caller's mask is left alone
    assert visited.sum() == 1


def test_win(corridor):
    game, won, out = _play(corridor, "\nd\nD\ns\ns\n")
    assert won
    assert game.moves == 4
    assert game.player == (3, 3)
    assert "=== MAZE GAME ===" in out
    assert "Congratulations! You reached the exit in 4 moves!" in out


def test_wall_and_invalid_input_do_not_count(corridor):
    game, won, out = _play(corridor, "\nw\nx\n\nd\nd\ns\ns\n")
    assert won
    assert game.moves == 4
    assert "You can't move there! That's a wall or out of bounds." in out
    assert out.count("Invalid move!") == 2


def test_quit(corridor):
    game, won, out = _play(corridor, "\nd\nquit\n")
    assert not won
    assert game.moves == 1
    assert "Game ended. Thanks for playing!" in out
    assert "Congratulations" not in out


def test_eof_ends_game(corridor):
    game, won, out = _play(corridor, "\nd\n")
    assert not won
    assert "Game ended. Thanks for playing!" in out

    game, won, out = _play(corridor, "")
    assert not won
    assert game.moves == 0


def test_hint(corridor):
    game, won, out = _play(corridor, "\nh\nd\nd\nh\nq\n")
    assert "Hint: move right (D)" in out
    assert "Hint: move down (S)" in out
    assert game.moves == 2


def test_hint_when_cut_off(walled_end):
    game = MazeGame(walled_end, (1, 1), (5, 5), stdin=io.StringIO(""), stdout=io.StringIO())
    assert game.hint() is None


def test_visited_trail(corridor):
    game, _, _ = _play(corridor, "\nd\nd\nq\n")
    assert game.visited[1, 1] and game.visited[1, 2] and game.visited[1, 3]
    assert not game.visited[3, 3]
    # the grid itself is untouched
    assert corridor.is_path((1, 2))
