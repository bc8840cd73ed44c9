"""
Snake State - snake body, apple, buffered direction, speed.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...engine_core.errors import SnapshotError
from ...engine_core.grid import Direction
from ...engine_core.state import EngineState, enum_field, int_field, int_tuple, require_field
from .logic import BASE_SPEED_MS, SIZE, Snake, initial_snake


class GameStatus(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    DEAD = "dead"


@dataclass(frozen=True)
class SnakeState(EngineState):
    """
    Invariants while alive:
    - no duplicate indices in snake
    - apple is never on the snake
    - speed_ms >= MIN_SPEED_MS
    """
    snake: Snake
    apple: int | None = None
    dir: Direction = Direction.RIGHT  # applied on the last tick
    next_dir: Direction = Direction.RIGHT  # buffered for the next tick
    status: GameStatus = GameStatus.IDLE
    score: int = 0
    best: int = 0
    speed_ms: int = BASE_SPEED_MS
    crash_at: int | None = None  # collision cell, for rendering
    size: int = SIZE

    @property
    def head(self) -> int:
        return self.snake[0]

    def to_snapshot(self) -> dict[str, Any]:
        return {
            "snake": list(self.snake),
            "apple": self.apple,
            "dir": self.dir.value,
            "next_dir": self.next_dir.value,
            "status": self.status.value,
            "score": self.score,
            "best": self.best,
            "speed_ms": self.speed_ms,
            "crash_at": self.crash_at,
            "size": self.size,
        }

    @classmethod
    def from_snapshot(cls, snapshot: dict[str, Any], current: SnakeState | None = None) -> SnakeState:
        """`snake` is mandatory; everything else falls back to defaults."""
        snake = int_tuple(require_field(snapshot, "snake"), "snake")
        if not snake:
            raise SnapshotError("Snake must have at least one cell", field="snake")
        size = int_field(snapshot, "size", SIZE)
        if size < 3:
            raise SnapshotError("Grid size must be at least 3", field="size")
        if any(not 0 <= i < size * size for i in snake):
            raise SnapshotError("Snake cell out of range", field="snake")
        apple = int_field(snapshot, "apple", None)
        if apple is not None and (not 0 <= apple < size * size or apple in snake):
            raise SnapshotError("Apple must be a free cell on the grid", field="apple")

        direction = enum_field(snapshot, "dir", Direction, Direction.RIGHT)
        fallback_best = current.best if current is not None else 0
        return cls(
            snake=snake,
            apple=apple,
            dir=direction,
            next_dir=enum_field(snapshot, "next_dir", Direction, direction),
            status=enum_field(snapshot, "status", GameStatus, GameStatus.IDLE),
            score=int_field(snapshot, "score", 0),
            best=int_field(snapshot, "best", fallback_best),
            speed_ms=int_field(snapshot, "speed_ms", BASE_SPEED_MS),
            crash_at=int_field(snapshot, "crash_at", None),
            size=size,
        )


def initial_state(size: int = SIZE) -> SnakeState:
    """Idle snake with no apple; NEW_GAME injects the randomness."""
    return SnakeState(snake=initial_snake(size), size=size)
