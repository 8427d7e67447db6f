"""Rules constants shared by the dice evaluator and the system adapters."""

from __future__ import annotations

# =============================================================================
# Dice Notation Limits
# =============================================================================

MIN_DICE_COUNT = 1
"""Fewest dice a single expression may roll."""

MAX_DICE_COUNT = 1000
"""Most dice a single expression may roll (keeps every roll O(count) and bounded)."""

MIN_DICE_SIDES = 2
"""Smallest die allowed; a one-sided die is not a random draw."""

MAX_DICE_SIDES = 1000
"""Largest die allowed."""

MAX_DICE_MODIFIER = 10_000
"""Largest static modifier, positive or negative."""

MAX_NOTATION_DIGITS = 6
"""Longest digit run accepted for any number in dice notation."""

# =============================================================================
# D20 System Constants
# =============================================================================

D20_SIDES = 20
"""Sides on the check die."""

NATURAL_CRITICAL = 20
"""A natural 20 on the check die always succeeds."""

NATURAL_FUMBLE = 1
"""A natural 1 on the check die always fails."""

DEFAULT_D20_DIFFICULTY = 10
"""Difficulty used when a d20 ability check is made without one (a medium DC)."""

DEFAULT_INITIATIVE_DEX_MOD = 0
"""Dexterity modifier added to initiative; the engine does not track stats."""

# =============================================================================
# PbtA System Constants
# =============================================================================

PBTA_DICE = "2d6"
"""Dice rolled for every PbtA move."""

PBTA_FULL_SUCCESS = 10
"""Totals at or above this are a full success."""

PBTA_MIXED_THRESHOLD = 7
"""Totals at or above this (and below a full success) are a partial success."""


__all__ = [
    "MIN_DICE_COUNT",
    "MAX_DICE_COUNT",
    "MIN_DICE_SIDES",
    "MAX_DICE_SIDES",
    "MAX_DICE_MODIFIER",
    "MAX_NOTATION_DIGITS",
    "D20_SIDES",
    "NATURAL_CRITICAL",
    "NATURAL_FUMBLE",
    "DEFAULT_D20_DIFFICULTY",
    "DEFAULT_INITIATIVE_DEX_MOD",
    "PBTA_DICE",
    "PBTA_FULL_SUCCESS",
    "PBTA_MIXED_THRESHOLD",
]
