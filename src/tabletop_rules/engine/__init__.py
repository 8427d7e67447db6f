"""Rules engine module.

Resolves objective game mechanics (dice, ability checks, damage totals
and turn order) independently of any narrative text, for a rule system
chosen at runtime.

Submodules:
    dice: Dice notation parser and seeded random source
    session: Per-engine seeded session state
    models: Request and result schemas (Pydantic V2)
    contract: The RulesEngine capability interface
    factory: Engine selection by system key
    adapters: d20 and PbtA implementations

Example:
    >>> from tabletop_rules.engine import make_engine
    >>>
    >>> engine = make_engine("pbta")
    >>> engine.init_session(7)
    >>> result = engine.ability_check({"actor_id": "pc1", "skill": "cool"})
    >>> order = engine.turn_order(["pc1", "pc2"])
"""

from __future__ import annotations

# =============================================================================
# Dice
# =============================================================================
from tabletop_rules.engine.dice import (
    DiceExpression,
    RandomSource,
    RollResult,
    SeededRNG,
    parse,
    roll,
)

# =============================================================================
# Contract & Models
# =============================================================================
from tabletop_rules.engine.contract import RulesEngine, SystemKind
from tabletop_rules.engine.models import (
    AbilityCheckRequest,
    AbilityCheckResult,
    TurnOrderEntry,
)
from tabletop_rules.engine.modifiers import ModifierTable
from tabletop_rules.engine.session import Session

# =============================================================================
# Adapters & Factory
# =============================================================================
from tabletop_rules.engine.adapters import (
    DnD5eEngine,
    OutcomeTier,
    PbtaEngine,
    outcome_tier,
)
from tabletop_rules.engine.factory import (
    available_systems,
    engine_from_settings,
    make_engine,
    resolve_system,
)


__all__ = [
    # Dice
    "DiceExpression",
    "RollResult",
    "RandomSource",
    "SeededRNG",
    "parse",
    "roll",
    # Contract & Models
    "RulesEngine",
    "SystemKind",
    "AbilityCheckRequest",
    "AbilityCheckResult",
    "TurnOrderEntry",
    "ModifierTable",
    "Session",
    # Adapters
    "DnD5eEngine",
    "PbtaEngine",
    "OutcomeTier",
    "outcome_tier",
    # Factory
    "available_systems",
    "resolve_system",
    "make_engine",
    "engine_from_settings",
]
