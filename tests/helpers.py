from __future__ import annotations

from kaiju.contracts import DieFace, GameConfig, TokyoOccupancy
from kaiju.core import SequenceRandomSource, default_game_config
from kaiju.game import DiceSet, GameState, PlayerRegistry
from kaiju.game.players import Player

ONE, TWO, THREE = DieFace.ONE, DieFace.TWO, DieFace.THREE
ENERGY, CLAW, HEART = DieFace.ENERGY, DieFace.CLAW, DieFace.HEART


def pips(*faces: DieFace) -> list[int]:
    return [face.ordinal + 1 for face in faces]


def staged_dice(*faces: DieFace) -> DiceSet:
    return DiceSet(SequenceRandomSource(pips(*faces)))


def build_state(
    *players: tuple[str, int, int],
    occupant_id: int | None = None,
) -> GameState:
    """players are (name, hp, victory_points); ids follow argument order from 1."""
    registry = PlayerRegistry(
        [Player(player_id=i, name=name, hp=hp, victory_points=vp) for i, (name, hp, vp) in enumerate(players, start=1)]
    )
    return GameState(registry=registry, occupancy=TokyoOccupancy(occupant_id))


def reference_config() -> GameConfig:
    return default_game_config()
