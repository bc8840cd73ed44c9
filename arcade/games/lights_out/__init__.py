"""
Lights Out - turn every light off; each press flips a plus-shaped group.

This module contains:
- Board logic and the solvable-board generator
- The optimal solver (and hint helper)
- The Lights Out state model and reducer
"""

from .logic import DEFAULT_SIZE, MAX_SIZE, toggle_at, is_solved, empty_board, random_solvable_board
from .solver import Solution, solve_optimal, cached_solve, hint
from .state import LightsOutState, GameStatus, initial_state
from .reducer import LightsOutReducer

__all__ = [
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "toggle_at",
    "is_solved",
    "empty_board",
    "random_solvable_board",
    "Solution",
    "solve_optimal",
    "cached_solve",
    "hint",
    "LightsOutState",
    "GameStatus",
    "initial_state",
    "LightsOutReducer",
]
