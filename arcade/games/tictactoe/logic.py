"""
Tic-Tac-Toe rules.

Board representation: tuple of 9 cells, each Mark.X, Mark.O or None,
indexed row-major.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Mark(Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


Board = tuple[Mark | None, ...]
Line = tuple[int, int, int]

BOARD_CELLS = 9

# Winning lines (rows, columns, diagonals)
WIN_LINES: tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class WinInfo:
    winner: Mark
    line: Line


def empty_board() -> Board:
    return (None,) * BOARD_CELLS


def get_win_info(board: Board) -> WinInfo | None:
    """First winning line in WIN_LINES order, if any."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return WinInfo(winner=board[a], line=line)
    return None


def is_board_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def count_marks(board: Board, mark: Mark) -> int:
    return sum(1 for cell in board if cell is mark)


def side_to_move(board: Board) -> Mark:
    """Infer the mover from mark counts: X unless X already has more."""
    return Mark.X if count_marks(board, Mark.X) <= count_marks(board, Mark.O) else Mark.O
