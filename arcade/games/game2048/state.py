"""
2048 State - board, score and the escalating win threshold.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...engine_core.errors import SnapshotError
from ...engine_core.grid import Direction
from ...engine_core.state import EngineState, enum_field, int_field, int_tuple, require_field
from .logic import SIZE, Board, empty_board, is_power_of_two

BASE_WIN_TARGET = 2048


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Game2048State(EngineState):
    """
    Invariants:
    - len(board) == 16 and every nonzero cell is a power of two
    - score never decreases within a game
    - win_target only ever doubles
    """
    board: Board
    score: int = 0
    best: int = 0
    status: GameStatus = GameStatus.PLAYING
    won_at: int | None = None  # highest tile when the last win fired
    moved_last: Direction | None = None
    win_target: int = BASE_WIN_TARGET

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "board": list(self.board),
            "score": self.score,
            "best": self.best,
            "status": self.status.value,
            "won_at": self.won_at,
            "moved_last": self.moved_last.value if self.moved_last else None,
            "win_target": self.win_target,
        }

    @classmethod
    def from_snapshot(
        cls, snapshot: dict[str, Any], current: Game2048State | None = None
    ) -> Game2048State:
        """
        Build a state from a (possibly partial) snapshot.

        `board` is mandatory. A missing `best` keeps the current best.
        """
        board = int_tuple(require_field(snapshot, "board"), "board")
        if len(board) != SIZE * SIZE:
            raise SnapshotError(f"Board must have {SIZE * SIZE} cells", field="board")
        if any(v != 0 and not is_power_of_two(v) for v in board):
            raise SnapshotError("Board tiles must be powers of two", field="board")

        fallback_best = current.best if current is not None else 0
        return cls(
            board=board,
            score=int_field(snapshot, "score", 0),
            best=int_field(snapshot, "best", fallback_best),
            status=enum_field(snapshot, "status", GameStatus, GameStatus.PLAYING),
            won_at=int_field(snapshot, "won_at", None),
            moved_last=enum_field(snapshot, "moved_last", Direction, None),
            win_target=int_field(snapshot, "win_target", BASE_WIN_TARGET),
        )


def initial_state() -> Game2048State:
    """Empty board, no randomness - NEW_GAME spawns the first tiles."""
    return Game2048State(board=empty_board())
