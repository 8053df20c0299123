import pytest

from board2048.settings import MAX_BOARD_SIZE, MIN_BOARD_SIZE, step_board_size, validate_board_size


@pytest.mark.parametrize("size", [3, 4, 10, "6"])
def test_validate_board_size_accepts_range(size):
    assert validate_board_size(size) == int(size)


@pytest.mark.parametrize("size", [0, 2, 11, -4])
def test_validate_board_size_rejects_out_of_range(size):
    with pytest.raises(ValueError):
        validate_board_size(size)


def test_step_board_size():
    assert step_board_size(4, 1) == 5
    assert step_board_size(4, -1) == 3
    assert step_board_size(MIN_BOARD_SIZE, -1) == MIN_BOARD_SIZE
    assert step_board_size(MAX_BOARD_SIZE, 1) == MAX_BOARD_SIZE
