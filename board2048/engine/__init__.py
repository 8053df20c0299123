"""Pure 2048 rules: grid moves, tile spawning, scoring and end-of-game checks."""

from .board import (
    SPAWN_PROB_2,
    TARGET_TILE,
    Direction,
    apply_direction,
    as_grid,
    create_grid,
    empty_cells,
    grids_equal,
    has_reached_target,
    is_move_possible,
    max_tile,
    reduce_line,
    rotate_clockwise,
    spawn_tile,
    valid_directions,
)
from .state import GameState, initialize_session, transition

__all__ = [
    "SPAWN_PROB_2",
    "TARGET_TILE",
    "Direction",
    "GameState",
    "apply_direction",
    "as_grid",
    "create_grid",
    "empty_cells",
    "grids_equal",
    "has_reached_target",
    "initialize_session",
    "is_move_possible",
    "max_tile",
    "reduce_line",
    "rotate_clockwise",
    "spawn_tile",
    "transition",
    "valid_directions",
]
