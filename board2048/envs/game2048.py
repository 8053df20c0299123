import logging

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from board2048.settings import DEFAULT_BOARD_SIZE
from board2048.engine import (
    Direction,
    GameState,
    initialize_session,
    max_tile,
    transition,
    valid_directions,
)

logger = logging.getLogger(__name__)

# Action index -> direction
ACTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Game2048Env(gym.Env):
    """
    Gymnasium-compatible 2048 environment over the pure board engine.

    - Actions: 0=up, 1=down, 2=left, 3=right
    - Observation: (size, size) int64 grid of tile values
    - Reward: sum of merged tile values produced by the move
    - Terminated: when no further moves are possible
    - Truncated: never; reaching 2048 only sets ``info["victory"]``
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, render_mode: str | None = None):
        super().__init__()
        self.size = int(size)
        self.render_mode = render_mode

        # 4 directions
        self.action_space = spaces.Discrete(len(ACTIONS))
        # Largest reachable tile is 2**(cells + 1), capped by the int64 grid dtype
        high = min(2 ** (self.size * self.size + 1), np.iinfo(np.int64).max)
        self.observation_space = spaces.Box(low=0, high=high, shape=(self.size, self.size), dtype=np.int64)

        self.state: GameState | None = None

    def reset(self, *, seed: int | None = None, options: dict | None = None):
        super().reset(seed=seed)
        self.state = initialize_session(self.size, rng=self.np_random)
        logger.debug("New %dx%d session (seed=%s)", self.size, self.size, seed)
        info = {
            "score": self.state.score,
            "max_tile": max_tile(self.state.grid),
            "victory": self.state.victory,
        }
        return self.state.grid.copy(), info

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise gym.error.InvalidAction(f"Invalid action: {action}")
        assert self.state is not None

        # valid actions mask before applying the action
        valid_before = self._valid_actions()

        previous = self.state
        self.state = transition(previous, ACTIONS[int(action)], rng=self.np_random)
        moved = self.state is not previous
        reward = self.state.score - previous.score

        info = {
            "score": self.state.score,
            "moved": moved,
            "max_tile": max_tile(self.state.grid),
            "victory": self.state.victory,
            "valid_actions": valid_before,
            "valid_actions_next": self._valid_actions(),
        }
        return self.state.grid.copy(), float(reward), bool(self.state.terminal), False, info

    def render(self):
        if self.render_mode == "human" or self.render_mode is None:
            assert self.state is not None
            print("+" + "------+" * self.size)
            for row in self.state.grid:
                line = "|".join(f"{int(v):^6}" if v > 0 else "      " for v in row)
                print("|" + line + "|")
                print("+" + "------+" * self.size)
            print(f"Score: {self.state.score}\n")

    def _valid_actions(self) -> np.ndarray:
        """Return boolean mask of actions that would change the current board."""
        assert self.state is not None
        valid = set(valid_directions(self.state.grid))
        return np.array([d in valid for d in ACTIONS], dtype=bool)
