"""
Reducer - Applies actions to engine state.

The reducer is the single point of state change for a game.
All state changes must go through apply().

Design principles:
- Pure function: (state, action) -> new_state
- Total: every (state, action) pair has a result; rejected or
  unsupported actions return the input state object unchanged (a no-op)
- Randomness comes only from the injected rng, so a seeded rng makes
  every transition reproducible
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, TypeVar

from .action import Action, ActionType
from .errors import SnapshotError
from .rng import RandomSource, make_rng
from .state import EngineState

S = TypeVar("S", bound=EngineState)

Handler = Callable[[S, Action], S]


@dataclass
class Reducer(Generic[S]):
    """
    Base reducer. One subclass per game.

    Stateless apart from the random source - all game state is in S.
    Subclasses provide initial_state() and _handlers().
    """
    rng: RandomSource = field(default_factory=make_rng)

    def initial_state(self) -> S:
        """Side-effect free starting state (no randomness)."""
        raise NotImplementedError

    @property
    def supported_actions(self) -> frozenset[ActionType]:
        return frozenset(self._handlers())

    def apply(self, state: S, action: Action) -> S:
        """
        Apply an action to the state.

        Returns the new state, or `state` itself for a no-op.
        """
        handler = self._get_handler(action.action_type)
        if handler is None:
            return state
        return handler(state, action)

    def _get_handler(self, action_type: ActionType) -> Handler | None:
        """Get the handler function for an action type."""
        return self._handlers().get(action_type)

    def _handlers(self) -> dict[ActionType, Handler]:
        raise NotImplementedError

    def _handle_load(self, state: S, action: Action) -> S:
        """Rebuild state from a snapshot, defaulting missing fields."""
        snapshot = action.payload.snapshot
        if snapshot is None:
            raise SnapshotError("LOAD requires a snapshot")
        return type(state).from_snapshot(snapshot, current=state)


def apply_action(reducer: Reducer[S], state: S, action: Action) -> S:
    """Convenience wrapper around Reducer.apply."""
    return reducer.apply(state, action)


def apply_actions(reducer: Reducer[S], state: S, actions: Iterable[Action]) -> S:
    """Fold a sequence of actions over a state."""
    for action in actions:
        state = reducer.apply(state, action)
    return state
