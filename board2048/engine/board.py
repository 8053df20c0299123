"""Grid operations for the 2048 board.

A grid is a square int64 ``numpy`` array where 0 marks an empty cell. Every
grid returned from this module is a fresh, read-only array: moves never edit
a board in place, so an earlier snapshot stays valid after a new one is built.
"""

from enum import Enum

import numpy as np

# Tile value that counts as a win
TARGET_TILE = 2048
# Probability that a spawned tile is a 2 (otherwise 4)
SPAWN_PROB_2 = 0.9

_GENERATOR = np.random.default_rng()


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def as_grid(values) -> np.ndarray:
    """Return ``values`` as a read-only square int64 grid.

    Raises ValueError when the input is not a two-dimensional square matrix.
    """
    # a view may still be written through its base, so only owned arrays are shared
    if (
        isinstance(values, np.ndarray)
        and values.dtype == np.int64
        and values.flags.owndata
        and not values.flags.writeable
    ):
        arr = values
    else:
        arr = np.array(values, dtype=np.int64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Grid must be a square matrix, got shape {arr.shape}")
    if arr is values:
        return arr
    return _freeze(arr)


def create_grid(size: int) -> np.ndarray:
    return _freeze(np.zeros((size, size), dtype=np.int64))


def empty_cells(grid) -> list[tuple[int, int]]:
    """Coordinates of empty cells in row-major order."""
    grid = as_grid(grid)
    return [(int(r), int(c)) for r, c in np.argwhere(grid == 0)]


def spawn_tile(grid, rng: np.random.Generator | None = None) -> np.ndarray:
    """Place a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell.

    A full grid is returned unchanged. The input grid is never modified.
    """
    grid = as_grid(grid)
    cells = empty_cells(grid)
    if not cells:
        return grid
    if rng is None:
        rng = _GENERATOR
    row, col = cells[int(rng.integers(0, len(cells)))]
    value = 2 if rng.random() < SPAWN_PROB_2 else 4
    new_grid = grid.copy()
    new_grid[row, col] = value
    return _freeze(new_grid)


def reduce_line(line) -> tuple[np.ndarray, int]:
    """Slide a line towards index 0, merging equal neighbours once.

    Returns the new line (same length, zero padded) and the score gained,
    which is the sum of the merged tile values.
    """
    line = np.asarray(line, dtype=np.int64)
    compressed = line[line != 0]
    merged = []
    gained = 0
    j = 0
    L = len(compressed)
    while j < L:
        if j + 1 < L and compressed[j] == compressed[j + 1]:
            val = int(compressed[j]) * 2
            merged.append(val)
            gained += val
            # both inputs are consumed so the new tile cannot merge again
            j += 2
        else:
            merged.append(int(compressed[j]))
            j += 1
    new_line = np.zeros(len(line), dtype=np.int64)
    new_line[: len(merged)] = merged
    return new_line, gained


def rotate_clockwise(grid, times: int = 1) -> np.ndarray:
    """Rotate a grid by 90 degrees clockwise ``times`` times.

    Cell (r, c) of a single rotation holds original cell (N-1-c, r).
    """
    grid = as_grid(grid)
    return _freeze(np.rot90(grid, -(times % 4)).copy())


def _move_left(grid: np.ndarray) -> tuple[np.ndarray, int]:
    result = np.zeros_like(grid)
    gained = 0
    for i, row in enumerate(grid):
        new_row, row_gain = reduce_line(row)
        result[i, :] = new_row
        gained += row_gain
    return _freeze(result), gained


def apply_direction(grid, direction) -> tuple[np.ndarray, int]:
    """Move every tile towards ``direction``. Returns (new_grid, score_gained).

    All four directions reuse the left move: the grid is rotated (or its rows
    reversed) so the requested edge is on the left, then turned back.
    """
    grid = as_grid(grid)
    direction = Direction(direction)
    if direction is Direction.LEFT:
        return _move_left(grid)
    if direction is Direction.RIGHT:
        moved, gained = _move_left(grid[:, ::-1])
        return _freeze(np.ascontiguousarray(moved[:, ::-1])), gained
    if direction is Direction.UP:
        moved, gained = _move_left(rotate_clockwise(grid, 3))
        return rotate_clockwise(moved, 1), gained
    moved, gained = _move_left(rotate_clockwise(grid, 1))
    return rotate_clockwise(moved, 3), gained


def grids_equal(a, b) -> bool:
    return bool(np.array_equal(np.asarray(a), np.asarray(b)))


def is_move_possible(grid) -> bool:
    """True while at least one direction would change the grid."""
    grid = as_grid(grid)
    if (grid == 0).any():
        return True
    # any adjacent equal tiles?
    if np.any(grid[:, :-1] == grid[:, 1:]):
        return True
    return bool(np.any(grid[:-1, :] == grid[1:, :]))


def has_reached_target(grid) -> bool:
    return bool((as_grid(grid) >= TARGET_TILE).any())


def valid_directions(grid) -> list[Direction]:
    """Directions whose move would change the grid, in Direction order."""
    grid = as_grid(grid)
    return [d for d in Direction if not grids_equal(apply_direction(grid, d)[0], grid)]


def max_tile(grid) -> int:
    grid = as_grid(grid)
    return int(grid.max()) if grid.size else 0
