"""
2048 board logic.

Board: tuple of SIZE*SIZE ints, 0 = empty, otherwise a power of two.
Every direction is implemented with one canonical operation, slide_left,
applied to rows or columns, reversed for right/down.
"""

from __future__ import annotations
from dataclasses import dataclass

from ...engine_core.grid import Direction, col_indices, row_indices
from ...engine_core.rng import RandomSource, pick_index

SIZE = 4

Board = tuple[int, ...]

# 90% 2s, 10% 4s
SPAWN_TWO_PROBABILITY = 0.9


@dataclass(frozen=True)
class SlideResult:
    line: tuple[int, ...]
    moved: bool
    score_delta: int


@dataclass(frozen=True)
class MoveResult:
    board: Board
    moved: bool
    score_delta: int


def empty_board() -> Board:
    return (0,) * (SIZE * SIZE)


def slide_left(line) -> SlideResult:
    """
    Compress a line to the left and merge equal neighbors.

    Each pair merges at most once per move, scanning left to right,
    so [2, 2, 2, 2] becomes [4, 4, 0, 0] and [2, 0, 2, 2] becomes [4, 2, 0, 0].
    """
    original = tuple(line)
    tiles = [v for v in original if v != 0]

    merged: list[int] = []
    score_delta = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = tiles[i] * 2
            merged.append(value)
            score_delta += value
            i += 2
        else:
            merged.append(tiles[i])
            i += 1

    result = tuple(merged) + (0,) * (len(original) - len(merged))
    return SlideResult(line=result, moved=result != original, score_delta=score_delta)


def line_indices(direction: Direction) -> list[list[int]]:
    """
    The board's lines ordered so that sliding "left" along each one
    moves tiles in `direction`.
    """
    if direction is Direction.LEFT:
        return [row_indices(r, SIZE) for r in range(SIZE)]
    if direction is Direction.RIGHT:
        return [row_indices(r, SIZE)[::-1] for r in range(SIZE)]
    if direction is Direction.UP:
        return [col_indices(c, SIZE) for c in range(SIZE)]
    return [col_indices(c, SIZE)[::-1] for c in range(SIZE)]


def move(board: Board, direction: Direction) -> MoveResult:
    """Slide the whole board in one direction."""
    cells = list(board)
    moved = False
    score_delta = 0
    for indices in line_indices(direction):
        result = slide_left(board[i] for i in indices)
        for i, value in zip(indices, result.line):
            cells[i] = value
        moved = moved or result.moved
        score_delta += result.score_delta
    return MoveResult(board=tuple(cells), moved=moved, score_delta=score_delta)


def empty_cells(board: Board) -> list[int]:
    return [i for i, v in enumerate(board) if v == 0]


def spawn_random(board: Board, rng: RandomSource) -> Board:
    """
    Place one new tile on a uniformly chosen empty cell.

    Draws the position first, then the value. A full board is
    returned unchanged.
    """
    empties = empty_cells(board)
    if not empties:
        return board
    idx = empties[pick_index(rng, len(empties))]
    value = 2 if rng.random() < SPAWN_TWO_PROBABILITY else 4
    cells = list(board)
    cells[idx] = value
    return tuple(cells)


def has_moves(board: Board) -> bool:
    """True if there is an empty cell or two orthogonally adjacent equal tiles."""
    if 0 in board:
        return True
    for r in range(SIZE):
        for c in range(SIZE):
            value = board[r * SIZE + c]
            if c + 1 < SIZE and board[r * SIZE + c + 1] == value:
                return True
            if r + 1 < SIZE and board[(r + 1) * SIZE + c] == value:
                return True
    return False


def max_tile(board: Board) -> int:
    return max(board, default=0)


def is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0
