from __future__ import annotations

import argparse
from typing import Callable, Sequence

from kaiju.contracts import DecisionKind, DieFace, GameEvent, RerollSelection, ValidationError
from kaiju.core import EventBus, gameplay_random, seeded_random, validate_game_config
from kaiju.game import DiceSet, GameSession, format_roll, new_game

Prompt = Callable[[str], str]


class ConsoleDecisionProvider:
    def __init__(self, prompt: Prompt | None = None) -> None:
        self._prompt = prompt or input

    def ask_yes_no(self, kind: DecisionKind, subject_name: str, other_name: str | None) -> bool:
        if kind is DecisionKind.ENTER_VACANT_TOKYO:
            answer = self._prompt(f"    Tokyo is vacant. Does {subject_name} ENTER Tokyo? (Y/n): ")
            return answer.strip().lower() != "n"
        if kind is DecisionKind.CONCEDE_UNDER_ATTACK:
            question = f"    {subject_name} was attacked by {other_name}. Should {subject_name} CONCEDE Tokyo? (y/N): "
        else:
            question = f"    {subject_name} has finished attacking. CONCEDE Tokyo? (y/N): "
        return self._prompt(question).strip().lower() == "y"


class ConsoleRerollProvider:
    def __init__(self, prompt: Prompt | None = None) -> None:
        self._prompt = prompt or input

    def select(self, roll: Sequence[DieFace], round_number: int, max_rounds: int) -> str | RerollSelection:
        print(f"    Current dice: {format_roll(roll)}")
        return self._prompt(f"    Reroll {round_number} of {max_rounds}: (Indices 1-6, 0 for all, X to keep): ")


def print_event(event: GameEvent) -> None:
    indent = "  " if event.scope == "session" else "    "
    for claim in event.claims:
        print(f"{indent}{claim}")


def _prompt_player_names(prompt: Prompt, min_players: int, max_players: int) -> list[str]:
    raw = prompt(f"How many players ({min_players}-{max_players})? ").strip()
    count = int(raw) if raw.isdecimal() else min_players
    count = min(max_players, max(min_players, count))
    return [prompt(f"Enter name for Player {i}: ") for i in range(1, count + 1)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Kaiju Tokyo: local dice-and-claws turn engine")
    parser.add_argument("--players", nargs="+", metavar="NAME", help="player names in turn order (2-6)")
    parser.add_argument("--seed", type=int, default=None, help="seed for deterministic dev/testing runs")
    parser.add_argument("--max-turns", type=int, default=None, help="stop after this many turns")
    parser.add_argument("--tokyo-start", action="store_true", help="first player starts inside Tokyo")
    parser.add_argument("--max-hp", type=int, default=None, help="override the hp ceiling")
    parser.add_argument("--max-vp", type=int, default=None, help="override the victory point target")
    args = parser.parse_args(argv)

    overrides = {k: v for k, v in {"max_hp": args.max_hp, "max_vp": args.max_vp}.items() if v is not None}
    try:
        config = validate_game_config(overrides)
        print("# KAIJU TOKYO ENGINE #")
        names = args.players or _prompt_player_names(input, config.min_players, config.max_players)
        state = new_game(names, config, tokyo_start=args.tokyo_start)
    except ValidationError as exc:
        parser.error(str(exc))

    rand = seeded_random(args.seed) if args.seed is not None else gameplay_random()
    bus = EventBus()
    bus.subscribe(print_event)
    session = GameSession(
        state,
        config=config,
        dice=DiceSet(rand.spawn("dice")),
        decisions=ConsoleDecisionProvider(),
        rerolls=ConsoleRerollProvider(),
        event_bus=bus,
    )
    outcome = session.run(max_turns=args.max_turns)
    if outcome is None:
        print("Game stopped before a winner was decided.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
