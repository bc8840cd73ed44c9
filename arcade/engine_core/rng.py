"""
Random Source - The pluggable number source engines draw from.

Engines only ever call `random()`, so any `random.Random` works, and
tests can pass a scripted source to force exact spawns.
"""

from __future__ import annotations
import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1)."""

    def random(self) -> float:
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """Create a seedable generator (unseeded when seed is None)."""
    return random.Random(seed)


def pick_index(rng: RandomSource, count: int) -> int:
    """Uniform index in range(count); count must be positive."""
    return min(int(rng.random() * count), count - 1)
