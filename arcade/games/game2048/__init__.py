"""
2048 - slide tiles, merge equal pairs, reach 2048 (then 4096, ...).

This module contains:
- Board logic (slide_left, move, spawn, has_moves)
- The 2048 state model
- The 2048 reducer
"""

from .logic import SIZE, slide_left, move, spawn_random, has_moves, max_tile, empty_board
from .state import Game2048State, GameStatus, BASE_WIN_TARGET, initial_state
from .reducer import Game2048Reducer

__all__ = [
    "SIZE",
    "slide_left",
    "move",
    "spawn_random",
    "has_moves",
    "max_tile",
    "empty_board",
    "Game2048State",
    "GameStatus",
    "BASE_WIN_TARGET",
    "initial_state",
    "Game2048Reducer",
]
