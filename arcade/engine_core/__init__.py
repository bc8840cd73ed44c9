"""
Engine Core - Shared machinery for the game engines.

Every game is built from the same pieces:
1. Grid addressing for its board
2. A frozen EngineState subclass
3. Actions from the shared ActionType vocabulary
4. A Reducer subclass mapping (state, action) -> state
"""

from .grid import (
    Direction,
    to_index,
    from_index,
    step,
    neighbors_plus,
    orthogonal_neighbors,
    row_indices,
    col_indices,
)
from .action import Action, ActionType, ActionPayload, ActionResult
from .state import EngineState
from .reducer import Reducer, apply_action, apply_actions
from .rng import RandomSource, make_rng
from .errors import SnapshotError

__all__ = [
    "Direction",
    "to_index",
    "from_index",
    "step",
    "neighbors_plus",
    "orthogonal_neighbors",
    "row_indices",
    "col_indices",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "EngineState",
    "Reducer",
    "apply_action",
    "apply_actions",
    "RandomSource",
    "make_rng",
    "SnapshotError",
]
