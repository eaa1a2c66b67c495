from .providers import (
    AskedQuestion,
    GreedyRerollProvider,
    RandomDecisionProvider,
    ScriptedDecisionProvider,
    ScriptedRerollProvider,
)
from .replay import ReplayHarness

__all__ = [
    "AskedQuestion",
    "GreedyRerollProvider",
    "RandomDecisionProvider",
    "ReplayHarness",
    "ScriptedDecisionProvider",
    "ScriptedRerollProvider",
]
