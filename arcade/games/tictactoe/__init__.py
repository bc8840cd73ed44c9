"""
Tic-Tac-Toe - Classic rules plus the Bolt variant (at most 3 marks each).
"""

from .logic import Mark, WIN_LINES, WinInfo, get_win_info, is_board_full, side_to_move, empty_board
from .state import TicTacToeState, GameStatus, Mode, BOLT_CAPACITY, initial_state
from .reducer import TicTacToeReducer

__all__ = [
    "Mark",
    "WIN_LINES",
    "WinInfo",
    "get_win_info",
    "is_board_full",
    "side_to_move",
    "empty_board",
    "TicTacToeState",
    "GameStatus",
    "Mode",
    "BOLT_CAPACITY",
    "initial_state",
    "TicTacToeReducer",
]
