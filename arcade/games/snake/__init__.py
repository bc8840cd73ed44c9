"""
Snake - steer a growing snake around a walled grid, eating apples.
"""

from .logic import SIZE, BASE_SPEED_MS, MIN_SPEED_MS, initial_snake, spawn_apple, step_snake, speed_for_score
from .state import SnakeState, GameStatus, initial_state
from .reducer import SnakeReducer

__all__ = [
    "SIZE",
    "BASE_SPEED_MS",
    "MIN_SPEED_MS",
    "initial_snake",
    "spawn_apple",
    "step_snake",
    "speed_for_score",
    "SnakeState",
    "GameStatus",
    "initial_state",
    "SnakeReducer",
]
