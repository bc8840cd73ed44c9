"""
Engine State - Shared base for per-game state values.

Design principles:
- Immutable: states are frozen dataclasses holding tuples, so every
  transition builds a new value and old values stay valid for undo
- Serializable: every state exports a plain-dict snapshot and can be
  rebuilt from one (the LOAD action)
- Game-agnostic: each game subclasses EngineState with its own fields
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, TypeVar

from .errors import SnapshotError

S = TypeVar("S", bound="EngineState")
E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class EngineState:
    """
    Base class for engine states.

    Subclasses implement to_snapshot() and from_snapshot(); LOAD relies
    on from_snapshot(state.to_snapshot()) == state.
    """

    def _copy_with(self: S, **kwargs) -> S:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)

    def to_snapshot(self) -> dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def from_snapshot(cls: type[S], snapshot: dict[str, Any], current: S | None = None) -> S:
        raise NotImplementedError


# Snapshot parsing helpers shared by the games


def require_field(snapshot: dict[str, Any], name: str) -> Any:
    """Return a mandatory snapshot field or raise SnapshotError."""
    if not isinstance(snapshot, dict):
        raise SnapshotError("Snapshot must be a mapping")
    if snapshot.get(name) is None:
        raise SnapshotError(f"Snapshot is missing mandatory field '{name}'", field=name)
    return snapshot[name]


def enum_field(snapshot: dict[str, Any], name: str, enum_cls: type[E], default: E) -> E:
    """Parse an enum field by value, falling back to `default` when absent."""
    raw = snapshot.get(name)
    if raw is None:
        return default
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)
    except ValueError:
        raise SnapshotError(f"Invalid value {raw!r} for '{name}'", field=name) from None


def int_field(snapshot: dict[str, Any], name: str, default: int | None) -> int | None:
    raw = snapshot.get(name)
    if raw is None:
        return default
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SnapshotError(f"Field '{name}' must be an integer", field=name)
    return raw


def int_tuple(values: Any, name: str) -> tuple[int, ...]:
    """Coerce a list of integers into a tuple, rejecting anything else."""
    if not isinstance(values, (list, tuple)):
        raise SnapshotError(f"Field '{name}' must be a list", field=name)
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise SnapshotError(f"Field '{name}' must contain integers", field=name)
    return tuple(values)
