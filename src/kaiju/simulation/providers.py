from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from kaiju.contracts import DecisionKind, DieFace, RandomSource, RerollSelection


@dataclass(slots=True)
class AskedQuestion:
    kind: DecisionKind
    subject_name: str
    other_name: str | None
    answer: bool


class ScriptedDecisionProvider:
    """Answers yes/no questions from queues; per-kind queues win over the flat one."""

    def __init__(
        self,
        answers: Iterable[bool] = (),
        *,
        by_kind: Mapping[DecisionKind, Iterable[bool]] | None = None,
        default: bool = False,
    ) -> None:
        self._answers: deque[bool] = deque(answers)
        self._by_kind: dict[DecisionKind, deque[bool]] = {k: deque(v) for k, v in (by_kind or {}).items()}
        self._default = default
        self.asked: list[AskedQuestion] = []

    def ask_yes_no(self, kind: DecisionKind, subject_name: str, other_name: str | None) -> bool:
        queue = self._by_kind.get(kind)
        if queue:
            answer = queue.popleft()
        elif self._answers:
            answer = self._answers.popleft()
        else:
            answer = self._default
        self.asked.append(AskedQuestion(kind, subject_name, other_name, answer))
        return answer

    def kinds_asked(self) -> list[DecisionKind]:
        return [q.kind for q in self.asked]


class ScriptedRerollProvider:
    def __init__(self, responses: Iterable[str | RerollSelection] = ()) -> None:
        self._responses: deque[str | RerollSelection] = deque(responses)
        self.prompts: list[tuple[int, int]] = []

    def select(self, roll: Sequence[DieFace], round_number: int, max_rounds: int) -> str | RerollSelection:
        self.prompts.append((round_number, max_rounds))
        if not self._responses:
            return RerollSelection.keep()
        return self._responses.popleft()


@dataclass(slots=True)
class RandomDecisionProvider:
    random_source: RandomSource
    enter_rate: float = 0.7
    concede_rate: float = 0.3
    asked: list[AskedQuestion] = field(default_factory=list)

    def ask_yes_no(self, kind: DecisionKind, subject_name: str, other_name: str | None) -> bool:
        rate = self.enter_rate if kind is DecisionKind.ENTER_VACANT_TOKYO else self.concede_rate
        answer = self.random_source.rand() < rate
        self.asked.append(AskedQuestion(kind, subject_name, other_name, answer))
        return answer


@dataclass(slots=True)
class GreedyRerollProvider:
    """Bot that keeps claws and numerals already paired, rerolling the rest."""

    keep_faces: frozenset[DieFace] = frozenset({DieFace.CLAW})

    def select(self, roll: Sequence[DieFace], round_number: int, max_rounds: int) -> str | RerollSelection:
        counts = {face: roll.count(face) for face in roll}
        indices = [
            i
            for i, face in enumerate(roll)
            if face not in self.keep_faces and not (face.numeral_value is not None and counts[face] >= 2)
        ]
        if not indices:
            return RerollSelection.keep()
        return RerollSelection.of(indices)
