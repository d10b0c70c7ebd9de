"""Seeded RandomSource backed by random.Random."""

from __future__ import annotations

import random
from typing import Any


class SeededRandom:
    """Deterministic RandomSource. Same seed, same rolls."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def uniform(self, lo: float, hi: float) -> float:
        return self._rng.uniform(lo, hi)

    def uniform_int(self, lo: int, hi: int) -> int:
        return self._rng.randint(lo, hi)

    def chance(self, p: float) -> bool:
        """Draw r in [0, 1) and pass iff r <= p. p <= 0 never passes."""
        if p <= 0.0:
            return False
        return self._rng.random() <= p

    def getstate(self) -> Any:
        return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        self._rng.setstate(state)
