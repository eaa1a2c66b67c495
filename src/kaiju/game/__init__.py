from .dice import DICE_COUNT, DiceSet, FaceTally, format_roll, tally
from .models import DecisionRecord, TurnOutcome, TurnReport
from .parser import parse_reroll_input
from .players import GameState, Player, PlayerRegistry, create_registry
from .resolver import TurnResolver, score_numerals
from .session import GameSession, new_game
from .victory import VictoryEvaluator

__all__ = [
    "DICE_COUNT",
    "DecisionRecord",
    "DiceSet",
    "FaceTally",
    "GameSession",
    "GameState",
    "Player",
    "PlayerRegistry",
    "TurnOutcome",
    "TurnReport",
    "TurnResolver",
    "VictoryEvaluator",
    "create_registry",
    "format_roll",
    "new_game",
    "parse_reroll_input",
    "score_numerals",
    "tally",
]
