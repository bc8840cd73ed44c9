"""
Snake Reducer - buffered turning, ticking, growth and collisions.

Ticks are driven from outside (a timer dispatching TICK every
state.speed_ms); the reducer never owns a clock.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ...engine_core.action import Action, ActionType
from ...engine_core.grid import Direction, step
from ...engine_core.reducer import Handler, Reducer
from .logic import BASE_SPEED_MS, SIZE, initial_snake, spawn_apple, speed_for_score, step_snake
from .state import GameStatus, SnakeState, initial_state

logger = logging.getLogger(__name__)


@dataclass
class SnakeReducer(Reducer[SnakeState]):
    """Applies Snake actions. Apple spawns draw from self.rng."""
    size: int = SIZE

    def initial_state(self) -> SnakeState:
        return initial_state(self.size)

    def _handlers(self) -> dict[ActionType, Handler]:
        return {
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.TURN: self._handle_turn,
            ActionType.TICK: self._handle_tick,
            ActionType.PAUSE: self._handle_pause,
            ActionType.RESUME: self._handle_resume,
            ActionType.RESET_BEST: self._handle_reset_best,
            ActionType.LOAD: self._handle_load,
        }

    def _handle_new_game(self, state: SnakeState, action: Action) -> SnakeState:
        snake = initial_snake(state.size)
        return state._copy_with(
            snake=snake,
            apple=spawn_apple(snake, self.rng, state.size),
            dir=Direction.RIGHT,
            next_dir=Direction.RIGHT,
            status=GameStatus.PLAYING,
            score=0,
            speed_ms=BASE_SPEED_MS,
            crash_at=None,
        )

    def _handle_turn(self, state: SnakeState, action: Action) -> SnakeState:
        """Buffer a turn; reversing into the neck is rejected."""
        direction = action.payload.direction
        if state.status is not GameStatus.PLAYING or direction is None:
            return state
        if len(state.snake) > 1 and direction.is_opposite(state.dir):
            return state
        if direction is state.next_dir:
            return state
        return state._copy_with(next_dir=direction)

    def _handle_tick(self, state: SnakeState, action: Action) -> SnakeState:
        if state.status is not GameStatus.PLAYING:
            return state

        result = step_snake(state.snake, state.next_dir, state.apple, self.rng, state.size)
        if result.hit:
            target = step(state.head, state.next_dir, state.size)
            logger.debug("Snake crashed with score %d", state.score)
            return state._copy_with(
                status=GameStatus.DEAD,
                crash_at=target if target is not None else state.head,
            )

        score = state.score + 1 if result.grew else state.score
        return state._copy_with(
            snake=result.snake,
            apple=result.apple,
            dir=state.next_dir,
            score=score,
            best=max(state.best, score),
            speed_ms=speed_for_score(score),
            crash_at=None,
        )

    def _handle_pause(self, state: SnakeState, action: Action) -> SnakeState:
        if state.status is not GameStatus.PLAYING:
            return state
        return state._copy_with(status=GameStatus.PAUSED)

    def _handle_resume(self, state: SnakeState, action: Action) -> SnakeState:
        if state.status is not GameStatus.PAUSED:
            return state
        return state._copy_with(status=GameStatus.PLAYING)

    def _handle_reset_best(self, state: SnakeState, action: Action) -> SnakeState:
        if state.best == 0:
            return state
        return state._copy_with(best=0)
