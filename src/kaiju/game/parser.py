from __future__ import annotations

import re

from kaiju.contracts import RerollSelection
from kaiju.core import RerollParseError
from kaiju.game.dice import DICE_COUNT

KEEP_TOKEN = "x"
ALL_TOKEN = "0"
_SEPARATORS = re.compile(r"[ ,]+")


def parse_reroll_input(text: str) -> RerollSelection:
    """Turn a typed reroll answer into a selection.

    ``x`` keeps the dice, ``0`` rerolls all of them, otherwise 1-based die
    numbers separated by spaces or commas. Blank input selects nothing.
    """
    lowered = text.strip().lower()
    if lowered == KEEP_TOKEN:
        return RerollSelection.keep()
    if lowered == ALL_TOKEN:
        return RerollSelection.all_dice(DICE_COUNT)

    indices: list[int] = []
    for token in _SEPARATORS.split(lowered):
        if not token:
            continue
        if not token.isdecimal() or not 1 <= int(token) <= DICE_COUNT:
            raise RerollParseError(token)
        indices.append(int(token) - 1)
    return RerollSelection.of(indices)
