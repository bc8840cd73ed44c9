"""
Tic-Tac-Toe Reducer - Classic and Bolt rulesets.

Bolt: each player keeps at most BOLT_CAPACITY marks. Placing one more
first clears that player's oldest mark (FIFO). The board never fills,
so Bolt has no draw, and undo is disabled.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ...engine_core.action import Action, ActionType
from ...engine_core.reducer import Handler, Reducer
from .logic import BOARD_CELLS, Mark, empty_board, get_win_info, is_board_full, side_to_move
from .state import BOLT_CAPACITY, GameStatus, Mode, TicTacToeState, initial_state

logger = logging.getLogger(__name__)


@dataclass
class TicTacToeReducer(Reducer[TicTacToeState]):
    """Applies Tic-Tac-Toe actions. Deterministic - never touches self.rng."""

    def initial_state(self) -> TicTacToeState:
        return initial_state()

    def _handlers(self) -> dict[ActionType, Handler]:
        return {
            ActionType.PLAY: self._handle_play,
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.UNDO: self._handle_undo,
            ActionType.RESET: self._handle_reset,
            ActionType.SET_MODE: self._handle_set_mode,
            ActionType.LOAD: self._handle_load,
        }

    def _handle_play(self, state: TicTacToeState, action: Action) -> TicTacToeState:
        i = action.payload.index
        if i is None or not 0 <= i < BOARD_CELLS:
            return state
        if state.status is not GameStatus.PLAYING or state.board[i] is not None:
            return state

        if state.mode is Mode.BOLT:
            return self._play_bolt(state, i)
        return self._play_classic(state, i)

    def _play_classic(self, state: TicTacToeState, i: int) -> TicTacToeState:
        board = list(state.board)
        board[i] = state.current
        board = tuple(board)

        win = get_win_info(board)
        if win:
            logger.debug("%s wins on line %s", win.winner.value, win.line)
            return state._copy_with(
                board=board, status=GameStatus.won_by(win.winner), win_line=win.line
            )
        if is_board_full(board):
            return state._copy_with(board=board, status=GameStatus.DRAW)
        return state._copy_with(
            board=board,
            current=state.current.other,
            history=state.history + (state.board,),
        )

    def _play_bolt(self, state: TicTacToeState, i: int) -> TicTacToeState:
        mover = state.current
        board = list(state.board)
        queue = state.queue_for(mover)

        # Evict the oldest mark before placing the new one
        if len(queue) >= BOLT_CAPACITY:
            board[queue[0]] = None
            queue = queue[1:]
        board[i] = mover
        board = tuple(board)
        queue = queue + (i,)

        queues = {"x_queue": queue} if mover is Mark.X else {"o_queue": queue}
        win = get_win_info(board)
        if win:
            logger.debug("%s wins (bolt) on line %s", win.winner.value, win.line)
            return state._copy_with(
                board=board,
                status=GameStatus.won_by(win.winner),
                win_line=win.line,
                **queues,
            )
        return state._copy_with(board=board, current=mover.other, **queues)

    def _handle_new_game(self, state: TicTacToeState, action: Action) -> TicTacToeState:
        """
        Fresh round in the same mode.

        With alternate_starter: the loser of a won round starts; in the
        middle of a round the player whose turn it is starts; otherwise
        (after a draw) X starts.
        """
        first = Mark.X
        if action.payload.alternate_starter:
            if state.status is GameStatus.X_WON:
                first = Mark.O
            elif state.status is GameStatus.O_WON:
                first = Mark.X
            elif state.status is GameStatus.PLAYING:
                first = state.current
        return TicTacToeState(board=empty_board(), current=first, mode=state.mode)

    def _handle_undo(self, state: TicTacToeState, action: Action) -> TicTacToeState:
        if state.mode is Mode.BOLT or not state.history:
            return state
        prev = state.history[-1]
        return state._copy_with(
            board=prev,
            current=side_to_move(prev),
            status=GameStatus.PLAYING,
            win_line=None,
            history=state.history[:-1],
        )

    def _handle_reset(self, state: TicTacToeState, action: Action) -> TicTacToeState:
        return initial_state(state.mode)

    def _handle_set_mode(self, state: TicTacToeState, action: Action) -> TicTacToeState:
        """Switch ruleset; always starts a fresh round."""
        try:
            mode = Mode(action.payload.mode)
        except ValueError:
            return state
        return initial_state(mode)
