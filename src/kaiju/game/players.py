from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Iterator, Sequence

from kaiju.contracts import VACANT, GameConfig, TokyoOccupancy, ValidationError, ValidationIssue
from kaiju.core import integrity_error


@dataclass(slots=True)
class Player:
    player_id: int
    name: str
    hp: int
    victory_points: int = 0
    energy: int = 0

    @property
    def is_active(self) -> bool:
        return self.hp > 0

    def gain_hp(self, amount: int, max_hp: int) -> int:
        before = self.hp
        self.hp = min(max_hp, max(0, self.hp + amount))
        return self.hp - before

    def take_damage(self, amount: int) -> int:
        before = self.hp
        self.hp = max(0, self.hp - amount)
        return before - self.hp

    def gain_victory_points(self, amount: int, max_vp: int) -> int:
        before = self.victory_points
        self.victory_points = min(max_vp, max(0, self.victory_points + amount))
        return self.victory_points - before

    def gain_energy(self, amount: int) -> int:
        before = self.energy
        self.energy = max(0, self.energy + amount)
        return self.energy - before

    def snapshot(self) -> dict[str, object]:
        return asdict(self)


class PlayerRegistry:
    """Ordered player collection; lookup is linear, sessions hold at most six players."""

    def __init__(self, players: Sequence[Player]) -> None:
        self._players = list(players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def find(self, player_id: int) -> Player | None:
        return next((p for p in self._players if p.player_id == player_id), None)

    def get(self, player_id: int) -> Player:
        player = self.find(player_id)
        if player is None:
            raise integrity_error(
                "registry",
                "UNKNOWN_PLAYER_ID",
                f"no player with id {player_id}",
                state_snapshot={"player_ids": [p.player_id for p in self._players]},
                identifiers={"player_id": str(player_id)},
            )
        return player

    def at(self, index: int) -> Player:
        return self._players[index]

    def others(self, player_id: int) -> list[Player]:
        return [p for p in self._players if p.player_id != player_id]

    def active(self) -> list[Player]:
        return [p for p in self._players if p.is_active]

    def snapshot(self) -> list[dict[str, object]]:
        return [p.snapshot() for p in self._players]


@dataclass(slots=True)
class GameState:
    registry: PlayerRegistry
    occupancy: TokyoOccupancy = field(default=VACANT)

    def occupant(self) -> Player | None:
        if self.occupancy.occupant_id is None:
            return None
        return self.registry.get(self.occupancy.occupant_id)

    def snapshot(self) -> dict[str, object]:
        return {"players": self.registry.snapshot(), "tokyo": self.occupancy.occupant_id}


def create_registry(names: Sequence[str], config: GameConfig) -> PlayerRegistry:
    issues: list[ValidationIssue] = []
    if not config.min_players <= len(names) <= config.max_players:
        issues.append(
            ValidationIssue(
                code="PLAYER_COUNT_OUT_OF_RANGE",
                severity="blocking",
                field_path="players",
                entity_id="session",
                message=f"expected {config.min_players}-{config.max_players} players, got {len(names)}",
            )
        )
    for position, name in enumerate(names, start=1):
        if not name.strip():
            issues.append(
                ValidationIssue(
                    code="PLAYER_NAME_BLANK",
                    severity="blocking",
                    field_path=f"players[{position - 1}]",
                    entity_id=str(position),
                    message="player name must not be blank",
                )
            )
    if issues:
        raise ValidationError(issues)

    return PlayerRegistry(
        [Player(player_id=i, name=name.strip(), hp=config.starting_hp) for i, name in enumerate(names, start=1)]
    )
