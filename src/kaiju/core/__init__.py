from .config import default_game_config, validate_game_config
from .errors import EngineIntegrityError, RerollParseError, build_forensic_artifact, integrity_error
from .events import EventBus, make_event, make_id, now_utc
from .randomness import PythonRandomSource, SequenceRandomSource, gameplay_random, seeded_random

__all__ = [
    "EngineIntegrityError",
    "EventBus",
    "PythonRandomSource",
    "RerollParseError",
    "SequenceRandomSource",
    "build_forensic_artifact",
    "default_game_config",
    "gameplay_random",
    "integrity_error",
    "make_event",
    "make_id",
    "now_utc",
    "seeded_random",
    "validate_game_config",
]
