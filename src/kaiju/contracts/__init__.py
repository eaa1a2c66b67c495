from .types import (
    NUMERAL_FACES,
    VACANT,
    DecisionKind,
    DecisionProvider,
    DieFace,
    ForensicArtifact,
    GameConfig,
    GameEvent,
    Outcome,
    OutcomeKind,
    RandomSource,
    RerollAction,
    RerollProvider,
    RerollSelection,
    TokyoOccupancy,
    ValidationError,
    ValidationIssue,
)

__all__ = [
    "DecisionKind",
    "DecisionProvider",
    "DieFace",
    "ForensicArtifact",
    "GameConfig",
    "GameEvent",
    "NUMERAL_FACES",
    "Outcome",
    "OutcomeKind",
    "RandomSource",
    "RerollAction",
    "RerollProvider",
    "RerollSelection",
    "TokyoOccupancy",
    "VACANT",
    "ValidationError",
    "ValidationIssue",
]
