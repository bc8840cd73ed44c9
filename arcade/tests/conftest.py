"""
Pytest fixtures for arcade tests.
"""

import pytest

from ..session import MemoryScoreStore, SessionManager


class ScriptedRandom:
    """
    Random source that replays a fixed sequence of floats, cycling.

    With [0.0] every spawn lands on the first free cell and every
    2048 spawn is a 2.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def first_free_rng() -> ScriptedRandom:
    """Always picks the first empty cell (and a 2 tile in 2048)."""
    return ScriptedRandom([0.0])


@pytest.fixture
def memory_store() -> MemoryScoreStore:
    return MemoryScoreStore()


@pytest.fixture
def session_manager(memory_store) -> SessionManager:
    return SessionManager(store=memory_store)
