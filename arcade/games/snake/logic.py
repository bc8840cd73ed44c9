"""
Snake logic.

The snake is a tuple of cell indices, head first, on a SIZE x SIZE grid
with solid walls. There is no literal board: occupancy is derived from
the snake and the apple.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from ...engine_core.grid import Direction, step, to_index
from ...engine_core.rng import RandomSource, pick_index

SIZE = 20

BASE_SPEED_MS = 130
MIN_SPEED_MS = 70
SPEED_STEP_MS = 5
POINTS_PER_SPEED_STEP = 5

Snake = tuple[int, ...]


@dataclass(frozen=True)
class StepResult:
    snake: Snake
    apple: int | None
    grew: bool
    hit: bool  # wall or self


def initial_snake(size: int = SIZE) -> Snake:
    """Three cells, horizontal, facing right, head at the end."""
    r = size // 2
    c = max(size // 2, 2)
    return tuple(to_index(r, c - k, size) for k in range(3))


def spawn_apple(occupied: Iterable[int], rng: RandomSource, size: int = SIZE) -> int | None:
    """Uniform free cell, or None when the snake fills the grid."""
    taken = set(occupied)
    empties = [i for i in range(size * size) if i not in taken]
    if not empties:
        return None
    return empties[pick_index(rng, len(empties))]


def step_snake(
    snake: Snake,
    direction: Direction,
    apple: int | None,
    rng: RandomSource,
    size: int = SIZE,
) -> StepResult:
    """
    Advance the snake one cell.

    Moving into the current tail is legal when not growing, because
    the tail vacates the cell this tick. When the move eats the apple
    the tail stays, so the tail cell counts as body.
    """
    head = snake[0]
    nxt = step(head, direction, size)
    if nxt is None:
        return StepResult(snake=snake, apple=apple, grew=False, hit=True)

    will_grow = apple is not None and nxt == apple
    body_to_check = snake if will_grow else snake[:-1]
    if nxt in body_to_check:
        return StepResult(snake=snake, apple=apple, grew=False, hit=True)

    if will_grow:
        new_snake = (nxt,) + snake
        new_apple = spawn_apple(new_snake, rng, size)
        return StepResult(snake=new_snake, apple=new_apple, grew=True, hit=False)

    return StepResult(snake=(nxt,) + snake[:-1], apple=apple, grew=False, hit=False)


def speed_for_score(score: int) -> int:
    """Tick interval in ms: 5 ms faster every 5 points, floored."""
    return max(MIN_SPEED_MS, BASE_SPEED_MS - (score // POINTS_PER_SPEED_STEP) * SPEED_STEP_MS)
