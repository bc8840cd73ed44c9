"""
Games module - Game-specific engines.

Each game has its own subpackage with:
- Board logic (pure functions)
- A frozen state model
- A reducer over the shared action vocabulary

No game depends on another; all of them share engine_core.
"""

from __future__ import annotations
from enum import Enum

from ..engine_core.reducer import Reducer
from ..engine_core.rng import RandomSource, make_rng
from .game2048 import Game2048Reducer
from .lights_out import LightsOutReducer
from .snake import SnakeReducer
from .tictactoe import TicTacToeReducer


class GameKind(Enum):
    GAME_2048 = "2048"
    SNAKE = "snake"
    TICTACTOE = "tictactoe"
    LIGHTS_OUT = "lights_out"


REDUCERS: dict[GameKind, type[Reducer]] = {
    GameKind.GAME_2048: Game2048Reducer,
    GameKind.SNAKE: SnakeReducer,
    GameKind.TICTACTOE: TicTacToeReducer,
    GameKind.LIGHTS_OUT: LightsOutReducer,
}


def create_reducer(kind: GameKind | str, rng: RandomSource | None = None) -> Reducer:
    """Build the reducer for a game, with a fresh unseeded rng by default."""
    kind = GameKind(kind)
    return REDUCERS[kind](rng=rng if rng is not None else make_rng())


__all__ = ["GameKind", "REDUCERS", "create_reducer"]
