from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence


class DieFace(str, Enum):
    ONE = "1"
    TWO = "2"
    THREE = "3"
    ENERGY = "energy"
    CLAW = "claw"
    HEART = "heart"

    @property
    def ordinal(self) -> int:
        return _FACE_ORDER.index(self)

    @property
    def numeral_value(self) -> int | None:
        return _NUMERAL_VALUES.get(self)

    @classmethod
    def from_pips(cls, pips: int) -> DieFace:
        if not 1 <= pips <= 6:
            raise ValueError(f"die pips must be 1-6, got {pips}")
        return _FACE_ORDER[pips - 1]


_FACE_ORDER: tuple[DieFace, ...] = tuple(DieFace)
_NUMERAL_VALUES = {DieFace.ONE: 1, DieFace.TWO: 2, DieFace.THREE: 3}
NUMERAL_FACES: tuple[DieFace, ...] = (DieFace.ONE, DieFace.TWO, DieFace.THREE)


class DecisionKind(str, Enum):
    CONCEDE_AFTER_ATTACKING = "concede_after_attacking"
    CONCEDE_UNDER_ATTACK = "concede_under_attack"
    ENTER_VACANT_TOKYO = "enter_vacant_tokyo"


class RerollAction(str, Enum):
    REROLL = "reroll"
    ALL = "all"
    KEEP = "keep"


class OutcomeKind(str, Enum):
    POINTS = "points"
    SURVIVAL = "survival"
    MUTUAL_ELIMINATION = "mutual_elimination"


class RandomSource(Protocol):
    def rand(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def spawn(self, substream_id: str) -> RandomSource: ...


class DecisionProvider(Protocol):
    def ask_yes_no(self, kind: DecisionKind, subject_name: str, other_name: str | None) -> bool: ...


class RerollProvider(Protocol):
    def select(self, roll: Sequence[DieFace], round_number: int, max_rounds: int) -> str | RerollSelection: ...


@dataclass(frozen=True, slots=True)
class GameConfig:
    max_hp: int = 12
    max_vp: int = 20
    starting_hp: int = 10
    tokyo_control_bonus: int = 2
    tokyo_entry_bonus: int = 1
    max_rerolls: int = 2
    min_players: int = 2
    max_players: int = 6

    def validate(self) -> None:
        if self.max_hp <= 0 or self.max_vp <= 0:
            raise ValueError("max_hp and max_vp must be positive")
        if not 0 < self.starting_hp <= self.max_hp:
            raise ValueError(f"starting_hp must be within 1..{self.max_hp}, got {self.starting_hp}")
        if self.tokyo_control_bonus < 0 or self.tokyo_entry_bonus < 0:
            raise ValueError("tokyo bonuses must not be negative")
        if self.max_rerolls < 0:
            raise ValueError("max_rerolls must not be negative")
        if not 1 <= self.min_players <= self.max_players:
            raise ValueError("player bounds must satisfy 1 <= min_players <= max_players")


@dataclass(frozen=True, slots=True)
class TokyoOccupancy:
    occupant_id: int | None = None

    @classmethod
    def occupied_by(cls, player_id: int) -> TokyoOccupancy:
        return cls(occupant_id=player_id)

    @property
    def is_vacant(self) -> bool:
        return self.occupant_id is None

    def is_occupant(self, player_id: int) -> bool:
        return self.occupant_id == player_id


VACANT = TokyoOccupancy()


@dataclass(frozen=True, slots=True)
class RerollSelection:
    action: RerollAction
    indices: frozenset[int] = frozenset()

    @classmethod
    def keep(cls) -> RerollSelection:
        return cls(RerollAction.KEEP)

    @classmethod
    def all_dice(cls, dice_count: int = 6) -> RerollSelection:
        return cls(RerollAction.ALL, frozenset(range(dice_count)))

    @classmethod
    def of(cls, indices: Sequence[int]) -> RerollSelection:
        return cls(RerollAction.REROLL, frozenset(indices))


@dataclass(slots=True)
class GameEvent:
    event_id: str
    time: datetime
    scope: str
    event_type: str
    actors: list[str]
    claims: list[str]
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Outcome:
    kind: OutcomeKind
    message: str
    winner_id: int | None = None
    winner_name: str | None = None


@dataclass(slots=True)
class ValidationIssue:
    code: str
    severity: str
    field_path: str
    entity_id: str
    message: str


class ValidationError(ValueError):
    def __init__(self, issues: list[ValidationIssue]) -> None:
        message = "; ".join(f"{i.code}:{i.entity_id}:{i.message}" for i in issues)
        super().__init__(message)
        self.issues = issues


@dataclass(slots=True)
class ForensicArtifact:
    artifact_id: str
    timestamp: datetime
    engine_scope: str
    error_code: str
    message: str
    state_snapshot: Mapping[str, Any]
    context: Mapping[str, Any]
    identifiers: Mapping[str, str]
    causal_fragment: Sequence[str]
