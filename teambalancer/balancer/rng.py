"""
Seeded RNG for deterministic, replayable team generation.
"""
from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

# Seeds drawn when the caller does not supply one; recorded so a result can be replayed
_SEED_MAX = 2**31 - 1


def new_seed() -> int:
    return random.SystemRandom().randint(1, _SEED_MAX)


class SeededRNG:
    """Wrapper around random.Random for reproducible shuffles."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def shuffle(self, seq: MutableSequence[T]) -> None:
        """In-place Fisher-Yates shuffle; every permutation equally likely."""
        for i in range(len(seq) - 1, 0, -1):
            j = self._rng.randint(0, i)
            seq[i], seq[j] = seq[j], seq[i]

    def shuffled(self, seq) -> list:
        """Shuffled copy; the input is left untouched."""
        out = list(seq)
        self.shuffle(out)
        return out
