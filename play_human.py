import curses
import logging

import hydra
import numpy as np
from omegaconf import DictConfig

from board2048.engine import GameState, initialize_session, max_tile, transition
from board2048.settings import step_board_size, validate_board_size

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}
QUIT_KEYS = (ord("q"), ord("Q"))
RESTART_KEYS = (ord("r"), ord("R"))
SIZE_KEYS = {ord("+"): 1, ord("="): 1, ord("-"): -1}


def handle_key(state: GameState, size: int, ch: int, rng: np.random.Generator | None = None):
    """Apply one key press. Returns (state, size, quit)."""
    if ch in QUIT_KEYS:
        return state, size, True
    if ch in RESTART_KEYS:
        return initialize_session(size, rng), size, False
    if ch in SIZE_KEYS:
        new_size = step_board_size(size, SIZE_KEYS[ch])
        if new_size == size:
            return state, size, False
        return initialize_session(new_size, rng), new_size, False
    # Moves are ignored once the game is over
    if ch in KEY_TO_DIRECTION and not state.terminal:
        return transition(state, KEY_TO_DIRECTION[ch], rng), size, False
    return state, size, False


def status_message(previous: GameState, state: GameState) -> str | None:
    if state.terminal:
        return "No more moves. Game over."
    if state.victory and not previous.victory:
        return "You reached 2048!"
    return None


def draw_board(stdscr, state: GameState, message: str | None = None):
    stdscr.clear()
    board = state.grid
    rows, cols = board.shape

    # Terminal size
    h, w = stdscr.getmaxyx()

    # Choose cell width based on largest value for better fit
    cell_w = max(4, len(str(max(2, max_tile(board)))) + 2)

    # Compute required dimensions
    board_width = 1 + cols * (cell_w + 1)  # e.g. +------+-...+
    total_height = rows * 2 + 4  # rows lines + borders + score/instructions/message

    # If too small, prompt user to resize
    if board_width > w or total_height > h:
        msg1 = "Window too small for board"
        msg2 = f"Need at least {board_width}x{total_height}, have {w}x{h}"
        if h > 0:
            stdscr.addstr(0, 0, msg1[: max(0, w)])
        if h > 1:
            stdscr.addstr(1, 0, msg2[: max(0, w)])
        stdscr.refresh()
        return

    # Center the board
    top = max(0, (h - total_height) // 2)
    left = max(0, (w - board_width) // 2)

    horiz = "+" + ("-" * cell_w + "+") * cols
    for r in range(rows):
        stdscr.addstr(top + r * 2, left, horiz)
        line = "|".join(
            f"{int(v):^{cell_w}}" if v > 0 else " " * cell_w for v in board[r]
        )
        stdscr.addstr(top + r * 2 + 1, left, "|" + line + "|")

    stdscr.addstr(top + rows * 2, left, horiz)
    stdscr.addstr(top + rows * 2 + 1, left, f"Score: {state.score}  Size: {rows}x{cols}")
    stdscr.addstr(top + rows * 2 + 2, left, "Arrows move, r restart, +/- size, q quit"[: max(0, w - left)])
    if message:
        stdscr.addstr(top + rows * 2 + 3, left, message[: max(0, w - left)])
    stdscr.refresh()


def play_loop(stdscr, size: int, seed: int | None = None) -> GameState:
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.keypad(True)

    rng = np.random.default_rng(seed)
    state = initialize_session(size, rng)
    message = None
    draw_board(stdscr, state)

    while True:
        ch = stdscr.getch()
        # Redraw on resize to adapt layout
        if ch == curses.KEY_RESIZE:
            draw_board(stdscr, state, message)
            continue

        previous = state
        state, size, quit_requested = handle_key(state, size, ch, rng)
        if quit_requested:
            return state
        if state is not previous:
            message = status_message(previous, state)
            draw_board(stdscr, state, message)


@hydra.main(config_path="./conf", config_name="env", version_base=None)
def main(cfg: DictConfig):
    size = validate_board_size(cfg.env.size)
    seed = cfg.get("seed")
    logger.info("Starting %dx%d game (seed=%s)", size, size, seed)
    state = curses.wrapper(play_loop, size=size, seed=seed)
    logger.info(
        "Final score %d, max tile %d%s",
        state.score,
        max_tile(state.grid),
        " (won)" if state.victory else "",
    )


if __name__ == "__main__":
    main()
