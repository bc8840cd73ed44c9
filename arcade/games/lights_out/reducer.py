"""
Lights Out Reducer - scrambling, pressing, resizing.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ...engine_core.action import Action, ActionType
from ...engine_core.reducer import Handler, Reducer
from .logic import DEFAULT_SIZE, empty_board, is_solved, is_valid_size, random_solvable_board, toggle_at
from .state import GameStatus, LightsOutState, initial_state

logger = logging.getLogger(__name__)


@dataclass
class LightsOutReducer(Reducer[LightsOutState]):
    """Applies Lights Out actions. Scrambles draw from self.rng."""
    size: int = DEFAULT_SIZE

    def initial_state(self) -> LightsOutState:
        return initial_state(self.size)

    def _handlers(self) -> dict[ActionType, Handler]:
        return {
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.RESET: self._handle_new_game,
            ActionType.CLICK: self._handle_click,
            ActionType.SET_SIZE: self._handle_set_size,
            ActionType.LOAD: self._handle_load,
        }

    def _handle_new_game(self, state: LightsOutState, action: Action) -> LightsOutState:
        """Fresh solvable board at the current size."""
        board = random_solvable_board(state.size, self.rng)
        return state._copy_with(board=board, moves=0, status=GameStatus.PLAYING)

    def _handle_click(self, state: LightsOutState, action: Action) -> LightsOutState:
        i = action.payload.index
        if state.status is not GameStatus.PLAYING:
            return state
        if i is None or not 0 <= i < len(state.board):
            return state

        board = toggle_at(state.board, i, state.size)
        moves = state.moves + 1
        status = GameStatus.WON if is_solved(board) else GameStatus.PLAYING
        if status is GameStatus.WON:
            logger.debug("Lights Out solved in %d moves", moves)
        return state._copy_with(board=board, moves=moves, status=status)

    def _handle_set_size(self, state: LightsOutState, action: Action) -> LightsOutState:
        size = action.payload.size
        if size is None or not is_valid_size(size):
            return state
        return LightsOutState(size=size, board=empty_board(size))
