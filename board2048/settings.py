"""Board size bounds used by the front-ends.

The engine accepts any size >= 1; collaborators keep players within 3..10.
"""

MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 10
DEFAULT_BOARD_SIZE = 4


def validate_board_size(size) -> int:
    size = int(size)
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise ValueError(f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}")
    return size


def step_board_size(size: int, delta: int) -> int:
    """Move the size by ``delta``; a step leaving the allowed range is ignored."""
    new_size = int(size) + int(delta)
    if MIN_BOARD_SIZE <= new_size <= MAX_BOARD_SIZE:
        return new_size
    return int(size)
