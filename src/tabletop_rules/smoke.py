"""Diagnostic run of the full engine interface.

Exercises every RulesEngine method once, the way the host's combat
handler would during a single encounter, and returns the results as
plain data.
"""

from __future__ import annotations

from typing import Any

from tabletop_rules.core.logging import get_logger
from tabletop_rules.engine.contract import SystemKind
from tabletop_rules.engine.factory import make_engine


logger = get_logger(__name__)

SMOKE_CHECK = {"actor_id": "pc1", "skill": "athletics", "difficulty": 12}
SMOKE_DAMAGE = "2d6+3"
SMOKE_ACTORS = ["pc1", "pc2", "goblin"]


def run_smoke(kind: str | SystemKind, seed: int) -> dict[str, Any]:
    """Run one check, one damage roll and one turn order on a fresh engine.

    Args:
        kind: Rule system key.
        seed: Session seed.

    Returns:
        ``{"system", "seed", "check", "damage", "order"}`` as plain data.

    Raises:
        UnsupportedSystemError: If ``kind`` is not a known system.
    """
    engine = make_engine(kind)
    engine.init_session(seed)

    check = engine.ability_check(SMOKE_CHECK)
    damage = engine.damage_roll(SMOKE_DAMAGE)
    order = engine.turn_order(SMOKE_ACTORS)

    report = {
        "system": engine.system.value,
        "seed": seed,
        "check": check.model_dump(),
        "damage": damage,
        "order": [entry.model_dump() for entry in order],
    }
    logger.info("Smoke run complete", **report)
    return report


__all__ = [
    "SMOKE_CHECK",
    "SMOKE_DAMAGE",
    "SMOKE_ACTORS",
    "run_smoke",
]
