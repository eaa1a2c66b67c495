from __future__ import annotations

from dataclasses import dataclass, field

from kaiju.contracts import DecisionKind, DieFace, GameEvent, Outcome, TokyoOccupancy
from kaiju.game.dice import FaceTally


@dataclass(slots=True)
class DecisionRecord:
    kind: DecisionKind
    subject_id: int
    answer: bool


@dataclass(slots=True)
class TurnReport:
    acting_player_id: int
    roll: list[DieFace]
    tally: FaceTally
    points_awarded: int = 0
    energy_gained: int = 0
    hp_healed: int = 0
    hearts_ignored: bool = False
    claw_count: int = 0
    damage_dealt: dict[int, int] = field(default_factory=dict)
    eliminated: list[int] = field(default_factory=list)
    decisions: list[DecisionRecord] = field(default_factory=list)
    entered_tokyo: bool = False
    held_tokyo: bool = False
    final_occupancy: TokyoOccupancy = field(default_factory=TokyoOccupancy)
    events: list[GameEvent] = field(default_factory=list)

    def answer_for(self, kind: DecisionKind) -> bool | None:
        return next((d.answer for d in self.decisions if d.kind == kind), None)


@dataclass(slots=True)
class TurnOutcome:
    turn_number: int
    player_id: int
    control_bonus: int
    report: TurnReport | None
    outcome: Outcome | None = None
    reroll_rounds_used: int = 0
    rejected_inputs: list[str] = field(default_factory=list)
