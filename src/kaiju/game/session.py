from __future__ import annotations

from typing import Sequence

from kaiju.contracts import (
    DecisionProvider,
    DieFace,
    GameConfig,
    Outcome,
    RerollAction,
    RerollProvider,
    RerollSelection,
    TokyoOccupancy,
)
from kaiju.core import EventBus, RerollParseError, default_game_config, integrity_error, make_event
from kaiju.game.dice import DiceSet, format_roll
from kaiju.game.models import TurnOutcome
from kaiju.game.parser import parse_reroll_input
from kaiju.game.players import GameState, Player, create_registry
from kaiju.game.resolver import TurnResolver
from kaiju.game.victory import VictoryEvaluator


def new_game(names: Sequence[str], config: GameConfig | None = None, *, tokyo_start: bool = False) -> GameState:
    """Set up a session; with ``tokyo_start`` the first player opens inside Tokyo with the entry bonus."""
    config = config or default_game_config()
    state = GameState(registry=create_registry(names, config))
    if tokyo_start:
        first = state.registry.at(0)
        state.occupancy = TokyoOccupancy.occupied_by(first.player_id)
        first.gain_victory_points(config.tokyo_entry_bonus, config.max_vp)
    return state


class GameSession:
    """Turn loop: control bonus, victory check, roll and rerolls, resolution, victory check."""

    def __init__(
        self,
        state: GameState,
        *,
        config: GameConfig,
        dice: DiceSet,
        decisions: DecisionProvider,
        rerolls: RerollProvider,
        event_bus: EventBus | None = None,
    ) -> None:
        self.state = state
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.turn_number = 1
        self.outcome: Outcome | None = None
        self._dice = dice
        self._decisions = decisions
        self._rerolls = rerolls
        self._resolver = TurnResolver(config, event_bus=self.event_bus)
        self._evaluator = VictoryEvaluator()
        self._player_index = 0

    def play_turn(self) -> TurnOutcome:
        if self.outcome is not None:
            raise RuntimeError(f"game already finished: {self.outcome.message}")
        player = self._next_active_player()
        self._publish("turn_started", player, [f"Turn {self.turn_number} - {player.name}'s turn"], turn=self.turn_number)

        bonus = self._resolver.apply_tokyo_control_bonus(self.state)
        result = TurnOutcome(turn_number=self.turn_number, player_id=player.player_id, control_bonus=bonus, report=None)
        result.outcome = self._check_victory()
        if result.outcome is not None:
            return result

        roll = self.roll_with_rerolls(player, result)
        result.report = self._resolver.process_roll(self.state, player.player_id, roll, self._decisions)
        result.outcome = self._check_victory()

        self._player_index += 1
        self.turn_number += 1
        return result

    def run(self, max_turns: int | None = None) -> Outcome | None:
        played = 0
        while self.outcome is None and (max_turns is None or played < max_turns):
            self.play_turn()
            played += 1
        return self.outcome

    def roll_with_rerolls(self, player: Player, result: TurnOutcome | None = None) -> list[DieFace]:
        roll = self._dice.roll()
        self._publish("dice_rolled", player, [f"Dice: {format_roll(roll)}"], faces=[f.value for f in roll])
        rounds_used = 0
        while rounds_used < self.config.max_rerolls:
            answer = self._rerolls.select(list(roll), rounds_used + 1, self.config.max_rerolls)
            if isinstance(answer, RerollSelection):
                selection = answer
            else:
                try:
                    selection = parse_reroll_input(answer)
                except RerollParseError as exc:
                    if result is not None:
                        result.rejected_inputs.append(answer)
                    self._publish("input_rejected", player, [str(exc)], text=answer)
                    continue
            if selection.action is RerollAction.KEEP:
                break
            self._dice.reroll(roll, selection.indices)
            rounds_used += 1
            self._publish(
                "dice_rerolled",
                player,
                [f"Reroll {rounds_used} of {self.config.max_rerolls}: {format_roll(roll)}"],
                indices=sorted(selection.indices),
                faces=[f.value for f in roll],
            )
        if result is not None:
            result.reroll_rounds_used = rounds_used
        return roll

    def _next_active_player(self) -> Player:
        count = len(self.state.registry)
        for offset in range(count):
            candidate = self.state.registry.at((self._player_index + offset) % count)
            if candidate.is_active:
                self._player_index = (self._player_index + offset) % count
                return candidate
        raise integrity_error(
            "session",
            "NO_ACTIVE_PLAYERS",
            "no active player left to take a turn",
            state_snapshot=self.state.snapshot(),
            identifiers={"turn": str(self.turn_number)},
        )

    def _check_victory(self) -> Outcome | None:
        outcome = self._evaluator.check(self.state.registry, self.config)
        if outcome is not None:
            self.outcome = outcome
            self.event_bus.publish(
                make_event("victory", outcome.kind.value, [outcome.winner_name] if outcome.winner_name else [], [outcome.message])
            )
        return outcome

    def _publish(self, event_type: str, player: Player, claims: list[str], **data: object) -> None:
        self.event_bus.publish(make_event("session", event_type, [player.name], claims, player_id=player.player_id, **data))
