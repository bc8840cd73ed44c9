"""
Grid Addressing - Row/column <-> linear index math for square boards.

All boards are stored row-major: index = row * size + col.
Nothing here wraps around the edges.
"""

from __future__ import annotations
from enum import Enum


class Direction(Enum):
    """Orthogonal directions shared by the sliding and moving games."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def is_opposite(self, other: Direction) -> bool:
        return _OPPOSITES[self] is other


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def to_index(row: int, col: int, size: int) -> int:
    return row * size + col


def from_index(index: int, size: int) -> tuple[int, int]:
    """Return (row, col) for a linear index."""
    return index // size, index % size


def in_bounds(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def step(index: int, direction: Direction, size: int) -> int | None:
    """
    Index of the cell one step away in `direction`.

    Returns None when the step would leave the grid.
    """
    row, col = from_index(index, size)
    dr, dc = direction.delta
    row, col = row + dr, col + dc
    if not in_bounds(row, col, size):
        return None
    return to_index(row, col, size)


def orthogonal_neighbors(index: int, size: int) -> list[int]:
    """Up to 4 orthogonal neighbors, in up/down/left/right order."""
    neighbors = []
    for direction in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
        n = step(index, direction, size)
        if n is not None:
            neighbors.append(n)
    return neighbors


def neighbors_plus(index: int, size: int) -> list[int]:
    """The cell itself plus its orthogonal neighbors (the "plus" shape)."""
    return [index] + orthogonal_neighbors(index, size)


def row_indices(row: int, size: int) -> list[int]:
    return [to_index(row, col, size) for col in range(size)]


def col_indices(col: int, size: int) -> list[int]:
    return [to_index(row, col, size) for row in range(size)]
