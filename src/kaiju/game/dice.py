from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from kaiju.contracts import DieFace, RandomSource

DICE_COUNT = 6


@dataclass(frozen=True, slots=True)
class FaceTally:
    """Occurrences of each face, indexed by face ordinal."""

    counts: tuple[int, int, int, int, int, int]

    def __getitem__(self, face: DieFace) -> int:
        return self.counts[face.ordinal]

    def items(self) -> Iterator[tuple[DieFace, int]]:
        return zip(DieFace, self.counts)

    def total(self) -> int:
        return sum(self.counts)

    def as_dict(self) -> dict[str, int]:
        return {face.name.lower(): count for face, count in self.items()}


def tally(roll: Sequence[DieFace]) -> FaceTally:
    counts = [0] * len(DieFace)
    for face in roll:
        counts[face.ordinal] += 1
    return FaceTally(counts=tuple(counts))  # type: ignore[arg-type]


class DiceSet:
    def __init__(self, random_source: RandomSource) -> None:
        self._random_source = random_source

    def roll(self) -> list[DieFace]:
        return [self._draw() for _ in range(DICE_COUNT)]

    def reroll(self, current: list[DieFace], indices: Iterable[int]) -> None:
        """Redraw the faces at ``indices`` in place.

        Indices outside 0..5 are ignored; filtering user input is the parser's job.
        """
        for index in sorted(set(indices)):
            if 0 <= index < DICE_COUNT:
                current[index] = self._draw()

    def _draw(self) -> DieFace:
        return DieFace.from_pips(self._random_source.randint(1, 6))


def format_roll(roll: Sequence[DieFace]) -> str:
    return " ".join(f"[{i + 1}:{face.value}]" for i, face in enumerate(roll))
