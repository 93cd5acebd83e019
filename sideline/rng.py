"""
Seeded random source.

Every stochastic decision in the engine draws from a SeededRandom so that
the same session seed replays the same career.  Each turn gets its own
stream derived from (session_seed, turn_id); streams are never shared
between careers.

Usage:
    from sideline.rng import SeededRandom

    rng = SeededRandom.derive(session_seed=42, turn_id=7)
    if rng.next_float() < 0.55:
        ...
    pick = rng.weighted_choice(["a", "b"], [3, 1])
"""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

_MASK_63 = (1 << 63) - 1
_TURN_STRIDE = 1_000_003


class SeededRandom(random.Random):
    """random.Random that only accepts integer seeds."""

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"SeededRandom requires an int seed, got {type(seed).__name__}")
        self.initial_seed = seed
        super().__init__(seed)

    @classmethod
    def derive(cls, session_seed: int, turn_id: int) -> "SeededRandom":
        """Per-turn stream: same (seed, turn) always yields the same draws."""
        if isinstance(session_seed, bool) or not isinstance(session_seed, int):
            raise TypeError("session_seed must be an int")
        if isinstance(turn_id, bool) or not isinstance(turn_id, int):
            raise TypeError("turn_id must be an int")
        return cls((session_seed * _TURN_STRIDE + turn_id) & _MASK_63)

    def next_float(self) -> float:
        return self.random()

    def next_int(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        if hi < lo:
            raise ValueError(f"next_int range is empty: [{lo}, {hi}]")
        return self.randint(lo, hi)

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        if not items:
            raise ValueError("weighted_choice on an empty sequence")
        if len(items) != len(weights):
            raise ValueError("items and weights differ in length")
        if sum(weights) <= 0:
            raise ValueError("weighted_choice needs at least one positive weight")
        return self.choices(list(items), weights=list(weights), k=1)[0]

    def normal(self, mean: float = 0.0, sd: float = 1.0) -> float:
        return self.gauss(mean, sd)
