from __future__ import annotations

from typing import Sequence

from kaiju.contracts import GameConfig
from kaiju.core import EventBus, default_game_config, seeded_random
from kaiju.game import DiceSet, GameSession, new_game
from kaiju.simulation.providers import GreedyRerollProvider, RandomDecisionProvider


class ReplayHarness:
    """Runs the same seeded bot session twice; equal fingerprints prove determinism."""

    def __init__(self, seed: int, names: Sequence[str], config: GameConfig | None = None, *, tokyo_start: bool = False) -> None:
        self.seed = seed
        self.names = list(names)
        self.config = config or default_game_config()
        self.tokyo_start = tokyo_start

    def build_session(self) -> GameSession:
        rand = seeded_random(self.seed)
        return GameSession(
            new_game(self.names, self.config, tokyo_start=self.tokyo_start),
            config=self.config,
            dice=DiceSet(rand.spawn("dice")),
            decisions=RandomDecisionProvider(rand.spawn("decisions")),
            rerolls=GreedyRerollProvider(),
            event_bus=EventBus(),
        )

    def replay(self, max_turns: int = 500) -> tuple[dict, dict]:
        return self._fingerprint(self._run(max_turns)), self._fingerprint(self._run(max_turns))

    def _run(self, max_turns: int) -> GameSession:
        session = self.build_session()
        session.run(max_turns=max_turns)
        return session

    def _fingerprint(self, session: GameSession) -> dict:
        outcome = session.outcome
        return {
            "turns": session.turn_number,
            "players": session.state.registry.snapshot(),
            "tokyo": session.state.occupancy.occupant_id,
            "outcome": outcome.message if outcome is not None else None,
            "events": [(e.scope, e.event_type) for e in session.event_bus.history()],
        }
