"""
Tests for grid addressing and the shared engine core.
"""

import pytest

from ..engine_core.action import Action, ActionType
from ..engine_core.grid import (
    Direction,
    col_indices,
    from_index,
    neighbors_plus,
    orthogonal_neighbors,
    row_indices,
    step,
    to_index,
)
from ..engine_core.rng import make_rng, pick_index
from .conftest import ScriptedRandom


class TestIndexing:
    """Row-major index math."""

    def test_round_trip(self):
        """to_index and from_index are inverses."""
        assert to_index(2, 3, 5) == 13
        assert from_index(13, 5) == (2, 3)

    def test_rows_and_columns(self):
        """Row and column index lists."""
        assert row_indices(1, 4) == [4, 5, 6, 7]
        assert col_indices(2, 4) == [2, 6, 10, 14]


class TestStep:
    """Single steps and edges."""

    def test_step_inside_grid(self):
        """A step inside the grid lands on the neighbor."""
        assert step(5, Direction.DOWN, 4) == 9
        assert step(5, Direction.RIGHT, 4) == 6

    def test_step_off_edge_is_none(self):
        """No wraparound at any edge."""
        assert step(0, Direction.UP, 4) is None
        assert step(0, Direction.LEFT, 4) is None
        assert step(3, Direction.RIGHT, 4) is None
        assert step(12, Direction.DOWN, 4) is None

    def test_opposites(self):
        """Every direction has one opposite."""
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.is_opposite(Direction.RIGHT)
        assert not Direction.LEFT.is_opposite(Direction.UP)


class TestNeighbors:
    """Orthogonal and plus-shaped neighborhoods."""

    def test_corner_has_two_neighbors(self):
        """Corner cells only have two orthogonal neighbors."""
        assert orthogonal_neighbors(0, 3) == [3, 1]

    def test_center_has_four_neighbors(self):
        """Neighbors come in up, down, left, right order."""
        assert orthogonal_neighbors(4, 3) == [1, 7, 3, 5]

    def test_plus_includes_self_first(self):
        """The plus shape is the cell followed by its neighbors."""
        assert neighbors_plus(4, 3) == [4, 1, 7, 3, 5]

    def test_single_cell_grid(self):
        """A 1x1 grid has no neighbors."""
        assert neighbors_plus(0, 1) == [0]


class TestRandomSource:
    """Seedable randomness."""

    def test_seeded_rng_is_reproducible(self):
        """The same seed gives the same sequence."""
        a, b = make_rng(42), make_rng(42)
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_pick_index_stays_in_range(self):
        """Values at the top of [0, 1) still map to the last index."""
        assert pick_index(ScriptedRandom([0.0]), 4) == 0
        assert pick_index(ScriptedRandom([0.5]), 4) == 2
        assert pick_index(ScriptedRandom([0.9999999999]), 4) == 3


class TestActions:
    """Action factories."""

    def test_move_accepts_strings(self):
        """Direction payloads can be given by name."""
        action = Action.move("left")
        assert action.action_type is ActionType.MOVE
        assert action.payload.direction is Direction.LEFT

    def test_bad_direction_rejected(self):
        """Unknown direction names fail at construction."""
        with pytest.raises(ValueError):
            Action.turn("sideways")
