"""
Lights Out logic.

Board: tuple of size*size bools, True = light on. Pressing a cell flips
it and its orthogonal neighbors (no wraparound).
"""

from __future__ import annotations

from ...engine_core.grid import neighbors_plus
from ...engine_core.rng import RandomSource, pick_index

DEFAULT_SIZE = 5
MIN_SIZE = 1
MAX_SIZE = 8

MIN_SCRAMBLE_PRESSES = 8
SCRAMBLE_FACTOR = 1.2

Board = tuple[bool, ...]


def empty_board(size: int) -> Board:
    return (False,) * (size * size)


def toggle_at(board: Board, index: int, size: int) -> Board:
    """Press one cell: flip the plus-neighborhood."""
    cells = list(board)
    for n in neighbors_plus(index, size):
        cells[n] = not cells[n]
    return tuple(cells)


def is_solved(board: Board) -> bool:
    """All lights off."""
    return not any(board)


def scramble_presses(size: int) -> int:
    return max(MIN_SCRAMBLE_PRESSES, int(size * size * SCRAMBLE_FACTOR))


def random_solvable_board(size: int, rng: RandomSource) -> Board:
    """
    Scramble from the solved board with random presses.

    Every board produced this way is reachable from all-off, so it is
    solvable. It can still come out all-off by chance.
    """
    total = size * size
    board = empty_board(size)
    for _ in range(scramble_presses(size)):
        board = toggle_at(board, pick_index(rng, total), size)
    return board


def is_valid_size(size: int) -> bool:
    return MIN_SIZE <= size <= MAX_SIZE
