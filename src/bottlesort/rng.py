# src/bottlesort/rng.py
# Pluggable shuffle sources. Generation only ever needs an in-place uniform
# shuffle, so anything with shuffle(list) can be injected (tests use scripted fakes).

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Protocol, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class ShuffleSource(Protocol):
    def shuffle(self, items: List[T]) -> None: ...


def pm_next(state: int) -> int:
    return (state * A) % M


@dataclass
class PMRandom:
    """Park-Miller minimal standard generator; replayable from its seed."""

    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        # 0 is a fixed point of the recurrence, so fold everything into 1..M-1
        return cls((seed % (M - 1)) + 1)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Return 1..n inclusive, uniformly."""
        assert n > 0
        # states run 1..M-1; drop the tail that would bias the modulo
        span = M - 1
        limit = span - span % n
        while True:
            v = self.next32() - 1
            if v < limit:
                return (v % n) + 1

    def shuffle(self, items: List[T]) -> None:
        # Fisher-Yates, last index down to 1
        for i in range(len(items) - 1, 0, -1):
            j = self.bounded(i + 1) - 1
            items[i], items[j] = items[j], items[i]


class PyRandom:
    """Stdlib-backed source for normal play."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rand = random.Random(seed)

    def shuffle(self, items: List[T]) -> None:
        self._rand.shuffle(items)


def default_source() -> ShuffleSource:
    return PyRandom()
