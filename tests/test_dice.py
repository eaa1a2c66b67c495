from __future__ import annotations

import pytest

from kaiju.contracts import DieFace
from kaiju.core import SequenceRandomSource, seeded_random
from kaiju.game import DICE_COUNT, DiceSet, tally
from tests.helpers import CLAW, ENERGY, HEART, ONE, THREE, TWO, pips, staged_dice


def test_pip_values_map_to_faces_in_order():
    assert [DieFace.from_pips(p) for p in range(1, 7)] == [ONE, TWO, THREE, ENERGY, CLAW, HEART]
    with pytest.raises(ValueError):
        DieFace.from_pips(7)


def test_roll_produces_six_faces_from_source():
    dice = staged_dice(ONE, CLAW, CLAW, HEART, ENERGY, THREE)
    assert dice.roll() == [ONE, CLAW, CLAW, HEART, ENERGY, THREE]


def test_tally_counts_always_sum_to_six():
    dice = DiceSet(seeded_random(2024))
    for _ in range(200):
        counts = tally(dice.roll())
        assert counts.total() == DICE_COUNT
        assert len(list(counts.items())) == 6


def test_tally_reports_zero_for_missing_faces():
    counts = tally([CLAW] * 6)
    assert counts[CLAW] == 6
    assert counts[HEART] == 0
    assert counts.as_dict()["one"] == 0


def test_seeded_rolls_are_reproducible():
    a = DiceSet(seeded_random(7))
    b = DiceSet(seeded_random(7))
    assert [a.roll() for _ in range(5)] == [b.roll() for _ in range(5)]


def test_reroll_empty_selection_leaves_roll_identical():
    source = SequenceRandomSource(pips(ONE, TWO, THREE, ENERGY, CLAW, HEART))
    dice = DiceSet(source)
    roll = dice.roll()
    before = list(roll)
    dice.reroll(roll, set())
    assert roll == before
    assert source.draws == 6


def test_reroll_only_touches_selected_positions():
    dice = staged_dice(ONE, ONE, ONE, ONE, ONE, ONE, HEART, CLAW)
    roll = dice.roll()
    dice.reroll(roll, {1, 4})
    assert roll == [ONE, HEART, ONE, ONE, CLAW, ONE]


def test_reroll_ignores_out_of_range_indices():
    source = SequenceRandomSource(pips(TWO, TWO, TWO, TWO, TWO, TWO, HEART))
    dice = DiceSet(source)
    roll = dice.roll()
    dice.reroll(roll, {-1, 6, 99, 0})
    assert roll == [HEART, TWO, TWO, TWO, TWO, TWO]
    assert source.remaining() == 0


def test_random_source_surface_is_limited_to_what_the_engine_draws():
    for source in (seeded_random(1), SequenceRandomSource([1])):
        assert callable(source.randint)
        assert callable(source.rand)
        assert callable(source.spawn)
        assert not hasattr(source, "choice")
    assert not hasattr(seeded_random(1), "seed")
