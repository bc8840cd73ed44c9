"""
Lights Out State - grid size, lights, move count.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...engine_core.errors import SnapshotError
from ...engine_core.state import EngineState, enum_field, int_field, require_field
from .logic import DEFAULT_SIZE, Board, empty_board, is_valid_size


class GameStatus(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"


@dataclass(frozen=True)
class LightsOutState(EngineState):
    """Invariant: len(board) == size * size."""
    size: int
    board: Board
    moves: int = 0
    status: GameStatus = GameStatus.IDLE

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "board": list(self.board),
            "moves": self.moves,
            "status": self.status.value,
        }

    @classmethod
    def from_snapshot(
        cls, snapshot: dict[str, Any], current: LightsOutState | None = None
    ) -> LightsOutState:
        """`board` is mandatory; `size` defaults to sqrt(len(board))."""
        raw = require_field(snapshot, "board")
        if not isinstance(raw, (list, tuple)) or not all(isinstance(v, bool) for v in raw):
            raise SnapshotError("Board must be a list of booleans", field="board")
        board = tuple(raw)

        size = int_field(snapshot, "size", math.isqrt(len(board)))
        if not is_valid_size(size) or len(board) != size * size:
            raise SnapshotError(f"Board of {len(board)} cells does not fit size {size}", field="size")

        return cls(
            size=size,
            board=board,
            moves=int_field(snapshot, "moves", 0),
            status=enum_field(snapshot, "status", GameStatus, GameStatus.IDLE),
        )


def initial_state(size: int = DEFAULT_SIZE) -> LightsOutState:
    """All lights off, idle; NEW_GAME scrambles."""
    return LightsOutState(size=size, board=empty_board(size))
