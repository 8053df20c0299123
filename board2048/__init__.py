"""board2048: 2048 rules engine and its Gym environment.

Expose the session API (`initialize_session`, `transition`) and `Game2048Env`.
"""

from .engine import Direction, GameState, initialize_session, transition
from .envs.game2048 import Game2048Env

__all__ = ["Direction", "GameState", "Game2048Env", "initialize_session", "transition"]
