from __future__ import annotations

import hashlib
import random
from collections import deque
from typing import Iterable

from kaiju.contracts import RandomSource


class PythonRandomSource(RandomSource):
    """Injected randomness source for dice rolls and test determinism."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    def rand(self) -> float:
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def spawn(self, substream_id: str) -> RandomSource:
        seed = self._seed
        if seed is None:
            return PythonRandomSource(seed=None)
        digest = hashlib.sha256(f"{seed}:{substream_id}".encode("ascii", "ignore")).hexdigest()
        return PythonRandomSource(seed=int(digest[:16], 16))


class SequenceRandomSource(RandomSource):
    """Replays a fixed list of integers; used to stage exact dice outcomes."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: deque[int] = deque(values)
        self.draws = 0

    def remaining(self) -> int:
        return len(self._values)

    def rand(self) -> float:
        return (self._next() % 1000) / 1000.0

    def randint(self, a: int, b: int) -> int:
        value = self._next()
        if not a <= value <= b:
            raise ValueError(f"scripted value {value} outside requested range {a}..{b}")
        return value

    def spawn(self, substream_id: str) -> RandomSource:
        return self

    def _next(self) -> int:
        if not self._values:
            raise IndexError("scripted random source exhausted")
        self.draws += 1
        return self._values.popleft()


def gameplay_random() -> PythonRandomSource:
    return PythonRandomSource(seed=None)


def seeded_random(seed: int) -> PythonRandomSource:
    return PythonRandomSource(seed=seed)
