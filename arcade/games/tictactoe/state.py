"""
Tic-Tac-Toe State - board, mover, undo history and Bolt queues.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...engine_core.errors import SnapshotError
from ...engine_core.state import EngineState, enum_field, int_tuple, require_field
from .logic import BOARD_CELLS, Board, Line, Mark, empty_board

# Bolt: each player keeps at most this many marks on the board
BOLT_CAPACITY = 3


class GameStatus(Enum):
    PLAYING = "playing"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"

    @classmethod
    def won_by(cls, mark: Mark) -> GameStatus:
        return cls.X_WON if mark is Mark.X else cls.O_WON


class Mode(Enum):
    CLASSIC = "classic"
    BOLT = "bolt"


@dataclass(frozen=True)
class TicTacToeState(EngineState):
    """
    Invariants:
    - len(board) == 9
    - in Bolt mode each queue holds at most BOLT_CAPACITY indices,
      oldest first, and matches that player's marks on the board
    - history is only appended in Classic mode
    """
    board: Board = field(default_factory=empty_board)
    current: Mark = Mark.X
    status: GameStatus = GameStatus.PLAYING
    win_line: Line | None = None
    history: tuple[Board, ...] = ()
    mode: Mode = Mode.CLASSIC
    x_queue: tuple[int, ...] = ()
    o_queue: tuple[int, ...] = ()

    def queue_for(self, mark: Mark) -> tuple[int, ...]:
        return self.x_queue if mark is Mark.X else self.o_queue

    @property
    def winner(self) -> Mark | None:
        if self.status is GameStatus.X_WON:
            return Mark.X
        if self.status is GameStatus.O_WON:
            return Mark.O
        return None

    @property
    def oldest_for_current(self) -> int | None:
        """Bolt: cell the current player's next mark will evict, if any."""
        if self.mode is not Mode.BOLT or self.status is not GameStatus.PLAYING:
            return None
        queue = self.queue_for(self.current)
        return queue[0] if len(queue) >= BOLT_CAPACITY else None

    @property
    def in_progress(self) -> bool:
        """A round is underway: playing and at least one mark placed."""
        return self.status is GameStatus.PLAYING and any(c is not None for c in self.board)

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "board": _board_to_list(self.board),
            "current": self.current.value,
            "status": self.status.value,
            "win_line": list(self.win_line) if self.win_line else None,
            "history": [_board_to_list(b) for b in self.history],
            "mode": self.mode.value,
            "x_queue": list(self.x_queue),
            "o_queue": list(self.o_queue),
        }

    @classmethod
    def from_snapshot(
        cls, snapshot: dict[str, Any], current: TicTacToeState | None = None
    ) -> TicTacToeState:
        """`board` is mandatory; the rest defaults to a fresh Classic round."""
        board = _board_from_list(require_field(snapshot, "board"), "board")
        win_line = snapshot.get("win_line")
        if win_line is not None:
            win_line = int_tuple(win_line, "win_line")
            if len(win_line) != 3:
                raise SnapshotError("win_line must have 3 cells", field="win_line")

        history = tuple(
            _board_from_list(b, "history") for b in snapshot.get("history") or []
        )
        x_queue = int_tuple(snapshot.get("x_queue") or [], "x_queue")
        o_queue = int_tuple(snapshot.get("o_queue") or [], "o_queue")
        if len(x_queue) > BOLT_CAPACITY or len(o_queue) > BOLT_CAPACITY:
            raise SnapshotError(f"Queues hold at most {BOLT_CAPACITY} marks")

        return cls(
            board=board,
            current=enum_field(snapshot, "current", Mark, Mark.X),
            status=enum_field(snapshot, "status", GameStatus, GameStatus.PLAYING),
            win_line=win_line,
            history=history,
            mode=enum_field(snapshot, "mode", Mode, Mode.CLASSIC),
            x_queue=x_queue,
            o_queue=o_queue,
        )


def _board_to_list(board: Board) -> list[str | None]:
    return [cell.value if cell else None for cell in board]


def _board_from_list(values: Any, name: str) -> Board:
    if not isinstance(values, (list, tuple)) or len(values) != BOARD_CELLS:
        raise SnapshotError(f"'{name}' must be a list of {BOARD_CELLS} cells", field=name)
    cells = []
    for v in values:
        if v is None or v == "":
            cells.append(None)
        elif isinstance(v, Mark):
            cells.append(v)
        elif v in ("X", "O"):
            cells.append(Mark(v))
        else:
            raise SnapshotError(f"Invalid cell {v!r} in '{name}'", field=name)
    return tuple(cells)


def initial_state(mode: Mode = Mode.CLASSIC) -> TicTacToeState:
    return TicTacToeState(mode=mode)
