from __future__ import annotations

from kaiju.contracts import GameConfig, Outcome, OutcomeKind
from kaiju.game.players import PlayerRegistry


class VictoryEvaluator:
    """Terminal-condition check; reads the registry and never mutates it."""

    def check(self, registry: PlayerRegistry, config: GameConfig) -> Outcome | None:
        active = registry.active()

        # Registry order decides simultaneous point winners.
        for player in active:
            if player.victory_points >= config.max_vp:
                return Outcome(
                    kind=OutcomeKind.POINTS,
                    message=f"{player.name} reached {config.max_vp} Victory Points!",
                    winner_id=player.player_id,
                    winner_name=player.name,
                )

        if len(active) == 1:
            survivor = active[0]
            return Outcome(
                kind=OutcomeKind.SURVIVAL,
                message=f"{survivor.name} is the Last Kaiju Standing!",
                winner_id=survivor.player_id,
                winner_name=survivor.name,
            )
        if not active:
            return Outcome(kind=OutcomeKind.MUTUAL_ELIMINATION, message="All Kaiju were eliminated simultaneously!")
        return None
