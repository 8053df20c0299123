import curses

import numpy as np

from board2048.engine import GameState
from play_human import handle_key, status_message


def test_arrow_key_moves():
    rng = np.random.default_rng(0)
    state = GameState(grid=[[0, 0, 2], [0, 0, 0], [0, 0, 0]])
    new_state, size, quit_requested = handle_key(state, 3, curses.KEY_LEFT, rng)
    assert new_state.grid[0, 0] == 2
    assert size == 3
    assert not quit_requested


def test_quit_key():
    state = GameState(grid=[[0, 0, 2], [0, 0, 0], [0, 0, 0]])
    new_state, _, quit_requested = handle_key(state, 3, ord("q"))
    assert quit_requested
    assert new_state is state


def test_moves_ignored_when_terminal():
    state = GameState(grid=[[2, 4], [4, 2]], terminal=True)
    for key in (curses.KEY_UP, curses.KEY_DOWN, curses.KEY_LEFT, curses.KEY_RIGHT):
        assert handle_key(state, 2, key)[0] is state


def test_restart_key_starts_new_session():
    state = GameState(grid=[[2, 4, 8], [4, 8, 2], [8, 2, 4]], score=300, terminal=True)
    new_state, size, _ = handle_key(state, 3, ord("r"), np.random.default_rng(1))
    assert size == 3
    assert new_state.score == 0
    assert not new_state.terminal
    assert np.count_nonzero(new_state.grid) == 2


def test_size_keys_resize_within_bounds():
    state = GameState(grid=np.zeros((4, 4), dtype=np.int64))
    bigger, size, _ = handle_key(state, 4, ord("+"))
    assert size == 5
    assert bigger.grid.shape == (5, 5)

    smallest = GameState(grid=np.zeros((3, 3), dtype=np.int64))
    unchanged, size, _ = handle_key(smallest, 3, ord("-"))
    assert size == 3
    assert unchanged is smallest


def test_unknown_key_is_ignored():
    state = GameState(grid=[[0, 0, 2], [0, 0, 0], [0, 0, 0]])
    assert handle_key(state, 3, ord("x"))[0] is state


def test_status_message():
    active = GameState(grid=[[2, 0], [0, 0]])
    won = GameState(grid=[[2048, 2], [0, 0]], victory=True)
    over = GameState(grid=[[2, 4], [4, 2]], terminal=True)
    assert status_message(active, active) is None
    assert status_message(active, won) == "You reached 2048!"
    assert status_message(won, won) is None
    assert status_message(active, over) == "No more moves. Game over."
