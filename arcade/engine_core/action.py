"""
Action System - Actions, payloads, and results.

Actions are the abstract inputs an outer layer (keyboard, swipe, HTTP,
CLI) translates raw events into. The engines never see raw input.

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .grid import Direction


class ActionType(Enum):
    """Every action name understood by at least one engine."""
    # Lifecycle
    NEW_GAME = "new_game"
    RESET = "reset"
    LOAD = "load"
    RESET_BEST = "reset_best"

    # 2048
    MOVE = "move"
    KEEP_PLAYING = "keep_playing"

    # Snake
    TURN = "turn"
    TICK = "tick"
    PAUSE = "pause"
    RESUME = "resume"

    # Tic-Tac-Toe
    PLAY = "play"
    UNDO = "undo"
    SET_MODE = "set_mode"

    # Lights Out
    CLICK = "click"
    SET_SIZE = "set_size"


@dataclass(frozen=True)
class ActionPayload:
    """
    Parameters for an action.

    Different action types use different fields; the reducer for
    each game reads only what it needs.
    """
    direction: Direction | None = None
    index: int | None = None
    mode: str | None = None
    size: int | None = None
    alternate_starter: bool = False
    snapshot: dict[str, Any] | None = None


@dataclass(frozen=True)
class Action:
    """A complete action to be applied to a game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def new_game(cls, alternate_starter: bool = False) -> Action:
        return cls(ActionType.NEW_GAME, ActionPayload(alternate_starter=alternate_starter))

    @classmethod
    def reset(cls) -> Action:
        return cls(ActionType.RESET)

    @classmethod
    def reset_best(cls) -> Action:
        return cls(ActionType.RESET_BEST)

    @classmethod
    def load(cls, snapshot: dict[str, Any]) -> Action:
        """Factory for snapshot restore."""
        return cls(ActionType.LOAD, ActionPayload(snapshot=snapshot))

    @classmethod
    def move(cls, direction: Direction | str) -> Action:
        """Factory for a 2048 slide."""
        return cls(ActionType.MOVE, ActionPayload(direction=Direction(direction)))

    @classmethod
    def keep_playing(cls) -> Action:
        return cls(ActionType.KEEP_PLAYING)

    @classmethod
    def turn(cls, direction: Direction | str) -> Action:
        """Factory for a buffered Snake turn."""
        return cls(ActionType.TURN, ActionPayload(direction=Direction(direction)))

    @classmethod
    def tick(cls) -> Action:
        return cls(ActionType.TICK)

    @classmethod
    def pause(cls) -> Action:
        return cls(ActionType.PAUSE)

    @classmethod
    def resume(cls) -> Action:
        return cls(ActionType.RESUME)

    @classmethod
    def play(cls, index: int) -> Action:
        """Factory for placing a Tic-Tac-Toe mark."""
        return cls(ActionType.PLAY, ActionPayload(index=index))

    @classmethod
    def undo(cls) -> Action:
        return cls(ActionType.UNDO)

    @classmethod
    def set_mode(cls, mode: str) -> Action:
        return cls(ActionType.SET_MODE, ActionPayload(mode=mode))

    @classmethod
    def click(cls, index: int) -> Action:
        """Factory for pressing a Lights Out cell."""
        return cls(ActionType.CLICK, ActionPayload(index=index))

    @classmethod
    def set_size(cls, size: int) -> Action:
        return cls(ActionType.SET_SIZE, ActionPayload(size=size))


@dataclass
class ActionResult:
    """
    Result of dispatching an action through a session.

    Contains:
    - Whether the engine accepted the action (False for a no-op)
    - The state after the action (the input state on a no-op)
    - Human-readable changes (for logs and UI)
    """
    accepted: bool
    new_state: Any
    changes: list[str] = field(default_factory=list)

    @classmethod
    def ignored(cls, state: Any) -> ActionResult:
        """Create a no-op result."""
        return cls(accepted=False, new_state=state)

    @classmethod
    def applied(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a result for an accepted action."""
        return cls(accepted=True, new_state=state, changes=changes or [])
