from __future__ import annotations

from kaiju.contracts import OutcomeKind
from kaiju.game import VictoryEvaluator
from tests.helpers import build_state, reference_config


def test_points_winner_with_everyone_alive():
    state = build_state(("Alpha", 10, 12), ("Beta", 4, 20), ("Gamma", 9, 19))
    outcome = VictoryEvaluator().check(state.registry, reference_config())
    assert outcome is not None
    assert outcome.kind is OutcomeKind.POINTS
    assert outcome.winner_id == 2
    assert outcome.message == "Beta reached 20 Victory Points!"


def test_simultaneous_point_winners_resolve_in_registry_order():
    state = build_state(("Alpha", 10, 20), ("Beta", 10, 20))
    outcome = VictoryEvaluator().check(state.registry, reference_config())
    assert outcome is not None
    assert outcome.winner_name == "Alpha"


def test_eliminated_player_cannot_win_on_points():
    state = build_state(("Alpha", 0, 20), ("Beta", 10, 3), ("Gamma", 10, 3))
    assert VictoryEvaluator().check(state.registry, reference_config()) is None


def test_last_kaiju_standing():
    state = build_state(("Alpha", 0, 15), ("Beta", 1, 3), ("Gamma", 0, 3))
    outcome = VictoryEvaluator().check(state.registry, reference_config())
    assert outcome is not None
    assert outcome.kind is OutcomeKind.SURVIVAL
    assert outcome.winner_id == 2
    assert outcome.message == "Beta is the Last Kaiju Standing!"


def test_mutual_elimination():
    state = build_state(("Alpha", 0, 15), ("Beta", 0, 3))
    outcome = VictoryEvaluator().check(state.registry, reference_config())
    assert outcome is not None
    assert outcome.kind is OutcomeKind.MUTUAL_ELIMINATION
    assert outcome.winner_id is None


def test_check_does_not_mutate_registry():
    state = build_state(("Alpha", 10, 20), ("Beta", 0, 3))
    before = state.registry.snapshot()
    VictoryEvaluator().check(state.registry, reference_config())
    assert state.registry.snapshot() == before
