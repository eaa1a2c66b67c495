from __future__ import annotations

from typing import Sequence

from kaiju.contracts import (
    NUMERAL_FACES,
    VACANT,
    DecisionKind,
    DecisionProvider,
    DieFace,
    GameConfig,
    GameEvent,
    TokyoOccupancy,
)
from kaiju.core import EventBus, integrity_error, make_event
from kaiju.game.dice import FaceTally, tally
from kaiju.game.models import DecisionRecord, TurnReport
from kaiju.game.players import GameState, Player

THREE_OF_A_KIND = 3


def score_numerals(counts: FaceTally) -> int:
    """Victory points for numeral sets: face value for three, +1 per extra matching die."""
    points = 0
    for face in NUMERAL_FACES:
        count = counts[face]
        if count >= THREE_OF_A_KIND:
            points += face.numeral_value + (count - THREE_OF_A_KIND)
    return points


class TurnResolver:
    """Applies a final roll to the game state and runs the Tokyo occupancy machine.

    The resolver never prompts. Every yes/no branch point is delegated to the
    injected DecisionProvider, and every visible effect is published as a
    GameEvent on the bus and collected on the returned TurnReport.
    """

    def __init__(self, config: GameConfig, event_bus: EventBus | None = None) -> None:
        self._config = config
        self._event_bus = event_bus

    def apply_tokyo_control_bonus(self, state: GameState) -> int:
        occupant = state.occupant()
        if occupant is None:
            return 0
        gained = occupant.gain_victory_points(self._config.tokyo_control_bonus, self._config.max_vp)
        self._emit(
            [],
            "tokyo",
            "tokyo_control_bonus",
            occupant,
            [f"{occupant.name} holds Tokyo and gains +{gained} VP (VP: {occupant.victory_points})"],
            gained=gained,
        )
        return gained

    def process_roll(
        self,
        state: GameState,
        acting_player_id: int,
        roll: Sequence[DieFace],
        decisions: DecisionProvider,
    ) -> TurnReport:
        actor = state.registry.get(acting_player_id)
        counts = tally(roll)
        report = TurnReport(acting_player_id=acting_player_id, roll=list(roll), tally=counts)
        self._emit(report.events, "turn", "roll_resolved", actor, [f"{actor.name} resolves {_describe(counts)}"], **counts.as_dict())

        in_tokyo = state.occupancy.is_occupant(acting_player_id)
        self._score_numerals(report, actor, counts)
        self._gain_energy(report, actor, counts)
        self._heal(report, actor, counts, in_tokyo)

        report.claw_count = counts[DieFace.CLAW]
        if report.claw_count > 0:
            if in_tokyo:
                self._attack_from_tokyo(state, report, actor, decisions)
            elif state.occupancy.is_vacant:
                self._offer_entry(state, report, actor, decisions)
            else:
                self._challenge_occupant(state, report, actor, decisions)

        report.final_occupancy = state.occupancy
        return report

    def _score_numerals(self, report: TurnReport, actor: Player, counts: FaceTally) -> None:
        points = score_numerals(counts)
        if points <= 0:
            return
        report.points_awarded = actor.gain_victory_points(points, self._config.max_vp)
        self._emit(
            report.events,
            "turn",
            "numerals_scored",
            actor,
            [f"Matched numbers gain {points} VP (VP: {actor.victory_points})"],
            points=points,
            applied=report.points_awarded,
        )

    def _gain_energy(self, report: TurnReport, actor: Player, counts: FaceTally) -> None:
        energy = counts[DieFace.ENERGY]
        if energy <= 0:
            return
        report.energy_gained = actor.gain_energy(energy)
        self._emit(report.events, "turn", "energy_gained", actor, [f"{actor.name} gains +{energy} energy (energy: {actor.energy})"], energy=energy)

    def _heal(self, report: TurnReport, actor: Player, counts: FaceTally, in_tokyo: bool) -> None:
        hearts = counts[DieFace.HEART]
        if hearts <= 0:
            return
        if in_tokyo:
            report.hearts_ignored = True
            self._emit(report.events, "turn", "hearts_ignored", actor, [f"{actor.name} cannot heal inside Tokyo"], hearts=hearts)
            return
        report.hp_healed = actor.gain_hp(hearts, self._config.max_hp)
        self._emit(
            report.events,
            "turn",
            "hp_healed",
            actor,
            [f"{actor.name} heals +{report.hp_healed} HP (HP: {actor.hp})"],
            hearts=hearts,
            healed=report.hp_healed,
        )

    def _attack_from_tokyo(self, state: GameState, report: TurnReport, actor: Player, decisions: DecisionProvider) -> None:
        claims = [f"{actor.name} attacks from Tokyo for {report.claw_count} damage"]
        for target in state.registry.others(actor.player_id):
            if state.occupancy.is_occupant(target.player_id):
                continue
            self._damage(report, target, claims)
        self._emit(report.events, "tokyo", "attack_from_tokyo", actor, claims, claws=report.claw_count)

        if not actor.is_active:
            return
        if self._ask(report, decisions, DecisionKind.CONCEDE_AFTER_ATTACKING, actor, None):
            self._vacate(state, report, actor, "conceded_after_attacking")

    def _challenge_occupant(self, state: GameState, report: TurnReport, actor: Player, decisions: DecisionProvider) -> None:
        occupant = state.occupant()
        if occupant is None:
            raise integrity_error(
                "resolver",
                "TOKYO_NOT_OCCUPIED",
                "challenge resolved against a vacant Tokyo",
                state_snapshot=state.snapshot(),
                identifiers={"player_id": str(actor.player_id)},
            )
        claims = [f"{actor.name} attacks {occupant.name} in Tokyo for {report.claw_count} damage"]
        self._damage(report, occupant, claims)
        self._emit(report.events, "tokyo", "attack_on_tokyo", actor, claims, claws=report.claw_count, target=occupant.player_id)

        if not occupant.is_active:
            self._vacate(state, report, occupant, "occupant_eliminated")
        elif self._ask(report, decisions, DecisionKind.CONCEDE_UNDER_ATTACK, occupant, actor):
            self._vacate(state, report, occupant, "conceded_under_attack")
        else:
            report.held_tokyo = True
            self._emit(report.events, "tokyo", "tokyo_held", occupant, [f"{occupant.name} holds Tokyo against {actor.name}"])
            return
        self._offer_entry(state, report, actor, decisions)

    def _offer_entry(self, state: GameState, report: TurnReport, actor: Player, decisions: DecisionProvider) -> None:
        if not self._ask(report, decisions, DecisionKind.ENTER_VACANT_TOKYO, actor, None):
            self._emit(report.events, "tokyo", "entry_declined", actor, [f"{actor.name} declines to enter Tokyo"])
            return
        state.occupancy = TokyoOccupancy.occupied_by(actor.player_id)
        report.entered_tokyo = True
        gained = actor.gain_victory_points(self._config.tokyo_entry_bonus, self._config.max_vp)
        self._emit(
            report.events,
            "tokyo",
            "tokyo_entered",
            actor,
            [f"{actor.name} enters Tokyo and gains +{gained} VP (VP: {actor.victory_points})"],
            gained=gained,
        )

    def _damage(self, report: TurnReport, target: Player, claims: list[str]) -> None:
        dealt = target.take_damage(report.claw_count)
        report.damage_dealt[target.player_id] = dealt
        claims.append(f"{target.name} takes {report.claw_count} damage (HP: {target.hp})")
        if dealt and not target.is_active:
            report.eliminated.append(target.player_id)
            claims.append(f"{target.name} has been eliminated")

    def _vacate(self, state: GameState, report: TurnReport, leaver: Player, reason: str) -> None:
        state.occupancy = VACANT
        self._emit(report.events, "tokyo", "tokyo_vacated", leaver, [f"{leaver.name} leaves Tokyo ({reason.replace('_', ' ')})"], reason=reason)

    def _ask(
        self,
        report: TurnReport,
        decisions: DecisionProvider,
        kind: DecisionKind,
        subject: Player,
        other: Player | None,
    ) -> bool:
        answer = bool(decisions.ask_yes_no(kind, subject.name, other.name if other is not None else None))
        report.decisions.append(DecisionRecord(kind=kind, subject_id=subject.player_id, answer=answer))
        return answer

    def _emit(
        self,
        sink: list[GameEvent],
        scope: str,
        event_type: str,
        subject: Player,
        claims: list[str],
        **data: object,
    ) -> None:
        event = make_event(scope, event_type, [subject.name], claims, player_id=subject.player_id, **data)
        sink.append(event)
        if self._event_bus is not None:
            self._event_bus.publish(event)


def _describe(counts: FaceTally) -> str:
    return ", ".join(f"{count}x {face.value}" for face, count in counts.items() if count)
