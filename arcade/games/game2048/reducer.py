"""
2048 Reducer - slide/merge/spawn transitions and win/loss detection.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ...engine_core.action import Action, ActionType
from ...engine_core.reducer import Handler, Reducer
from .logic import empty_board, has_moves, max_tile, move, spawn_random
from .state import BASE_WIN_TARGET, Game2048State, GameStatus, initial_state

logger = logging.getLogger(__name__)


@dataclass
class Game2048Reducer(Reducer[Game2048State]):
    """Applies 2048 actions. Randomness (tile spawns) comes from self.rng."""

    def initial_state(self) -> Game2048State:
        return initial_state()

    def _handlers(self) -> dict[ActionType, Handler]:
        return {
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.MOVE: self._handle_move,
            ActionType.KEEP_PLAYING: self._handle_keep_playing,
            ActionType.RESET_BEST: self._handle_reset_best,
            ActionType.LOAD: self._handle_load,
        }

    def _handle_new_game(self, state: Game2048State, action: Action) -> Game2048State:
        """Fresh board with two tiles. Best survives."""
        board = spawn_random(spawn_random(empty_board(), self.rng), self.rng)
        return Game2048State(
            board=board,
            score=0,
            best=state.best,
            status=GameStatus.PLAYING,
            won_at=None,
            moved_last=None,
            win_target=BASE_WIN_TARGET,
        )

    def _handle_move(self, state: Game2048State, action: Action) -> Game2048State:
        direction = action.payload.direction
        if state.status is not GameStatus.PLAYING or direction is None:
            return state

        result = move(state.board, direction)
        if not result.moved:
            return state

        board = spawn_random(result.board, self.rng)
        score = state.score + result.score_delta
        best = max(state.best, score)

        status = state.status
        won_at = state.won_at
        highest = max_tile(board)
        if highest >= state.win_target:
            status = GameStatus.WON
            won_at = highest
            logger.debug("2048 won at %d (target %d)", highest, state.win_target)
        elif not has_moves(board):
            status = GameStatus.LOST
            logger.debug("2048 lost with score %d", score)

        return state._copy_with(
            board=board,
            score=score,
            best=best,
            status=status,
            won_at=won_at,
            moved_last=direction,
        )

    def _handle_keep_playing(self, state: Game2048State, action: Action) -> Game2048State:
        """Acknowledge a win; the next win fires at the next power of two."""
        if state.status is not GameStatus.WON:
            return state
        return state._copy_with(status=GameStatus.PLAYING, win_target=state.win_target * 2)

    def _handle_reset_best(self, state: Game2048State, action: Action) -> Game2048State:
        if state.best == 0:
            return state
        return state._copy_with(best=0)
