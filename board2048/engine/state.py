"""Game session snapshots and the move transition.

The engine keeps no state between calls: the caller owns the current
``GameState`` and passes it into ``transition`` to get the next one.
"""

from dataclasses import dataclass

import numpy as np

from .board import (
    Direction,
    apply_direction,
    as_grid,
    create_grid,
    grids_equal,
    has_reached_target,
    is_move_possible,
    spawn_tile,
)


@dataclass(frozen=True, eq=False)
class GameState:
    """Immutable snapshot of a session.

    - grid: read-only square board
    - score: cumulative merge score
    - terminal: no move can change the grid any more (absorbing)
    - victory: some tile reached 2048 during the session (sticky)
    """

    grid: np.ndarray
    score: int = 0
    terminal: bool = False
    victory: bool = False

    def __post_init__(self):
        object.__setattr__(self, "grid", as_grid(self.grid))

    @property
    def size(self) -> int:
        return int(self.grid.shape[0])


def initialize_session(size: int, rng: np.random.Generator | None = None) -> GameState:
    """Start a new session: empty grid of ``size`` plus two spawned tiles."""
    grid = create_grid(size)
    grid = spawn_tile(grid, rng)
    grid = spawn_tile(grid, rng)
    return GameState(grid=grid, score=0, terminal=False, victory=False)


def transition(state: GameState, direction, rng: np.random.Generator | None = None) -> GameState:
    """Apply one directional move to ``state`` and return the next snapshot.

    A terminal state, or a move that leaves the grid as it is, returns
    ``state`` itself: no tile spawns and the score does not change.
    """
    if state.terminal:
        return state

    candidate, gained = apply_direction(state.grid, Direction(direction))
    if grids_equal(candidate, state.grid):
        return state

    grid = spawn_tile(candidate, rng)
    return GameState(
        grid=grid,
        score=state.score + gained,
        terminal=not is_move_possible(grid),
        victory=state.victory or has_reached_target(grid),
    )
