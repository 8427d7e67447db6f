"""Concrete rule system adapters.

Submodules:
    dnd5e: d20 checks, additive damage, initiative turn order.
    pbta: 2d6 + stat tiered moves, input-order turn order.
"""

from __future__ import annotations

from tabletop_rules.engine.adapters.dnd5e import DnD5eEngine
from tabletop_rules.engine.adapters.pbta import OutcomeTier, PbtaEngine, outcome_tier


__all__ = [
    "DnD5eEngine",
    "PbtaEngine",
    "OutcomeTier",
    "outcome_tier",
]
