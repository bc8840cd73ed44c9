"""
Lights Out optimal solver.

Once the presses in row 0 are fixed, every later row is forced: a cell
in row r must be pressed exactly when the light above it is still on,
since nothing below row r can reach row r-1 again. So the search tries
all 2**n row-0 patterns, chases each one down the board, keeps those
that leave the bottom row dark, and returns the one with the fewest
presses.

Rows are packed into ints (bit c = column c), so a row press is a few
xors. Cost is O(2**n * n) row operations, fine up to MAX_SIZE. Much
larger boards would need Gaussian elimination over GF(2) instead.

Ties between equally short solutions go to the lowest row-0 bitmask.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache

from .logic import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    presses: tuple[bool, ...]  # True = press that cell
    indices: tuple[int, ...]  # the pressed cells, ascending
    moves: int


def _pack_rows(board: Board, size: int) -> list[int]:
    rows = []
    for r in range(size):
        bits = 0
        for c in range(size):
            if board[r * size + c]:
                bits |= 1 << c
        rows.append(bits)
    return rows


def _press_row(rows: list[int], r: int, pattern: int, size: int, full: int) -> None:
    """Press every column set in `pattern` on row r, in place."""
    rows[r] ^= (pattern ^ (pattern << 1) ^ (pattern >> 1)) & full
    if r > 0:
        rows[r - 1] ^= pattern
    if r + 1 < size:
        rows[r + 1] ^= pattern


def _unpack(patterns: list[int], size: int) -> Solution:
    presses = tuple(
        bool(patterns[r] >> c & 1) for r in range(size) for c in range(size)
    )
    indices = tuple(i for i, pressed in enumerate(presses) if pressed)
    return Solution(presses=presses, indices=indices, moves=len(indices))


def solve_optimal(board: Board, size: int) -> Solution | None:
    """
    Minimal press set that turns every light off.

    Returns None if the board is unsolvable (some boards are, for
    sizes like 4 and 5; generated boards never are).
    """
    if len(board) != size * size:
        raise ValueError(f"Board has {len(board)} cells, expected {size * size}")

    start = _pack_rows(board, size)
    full = (1 << size) - 1

    best_patterns: list[int] | None = None
    best_moves = 0
    for mask in range(1 << size):
        rows = list(start)
        patterns = [mask]
        _press_row(rows, 0, mask, size, full)
        for r in range(1, size):
            forced = rows[r - 1]
            if forced:
                _press_row(rows, r, forced, size, full)
            patterns.append(forced)

        if rows[size - 1]:
            continue

        moves = sum(bin(p).count("1") for p in patterns)
        if best_patterns is None or moves < best_moves:
            best_patterns = patterns
            best_moves = moves

    if best_patterns is None:
        logger.debug("No solution for %dx%d board", size, size)
        return None
    return _unpack(best_patterns, size)


@lru_cache(maxsize=32)
def cached_solve(board: Board, size: int) -> Solution | None:
    """solve_optimal memoized on the board value (board must be a tuple)."""
    return solve_optimal(board, size)


def hint(board: Board, size: int) -> int | None:
    """Lowest index in the optimal press set, or None if there is nothing to suggest."""
    solution = cached_solve(tuple(board), size)
    if solution is None or not solution.indices:
        return None
    return solution.indices[0]
