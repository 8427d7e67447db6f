"""Tabletop Rules - pluggable rules engine for AI-narrated tabletop RPGs.

The narrator writes the prose; this package owns the mechanics. Dice
rolls, ability checks, damage totals and turn order are resolved here,
deterministically from a per-session seed, for a rule system picked at
runtime.

Example:
    >>> from tabletop_rules import make_engine
    >>>
    >>> engine = make_engine("dnd5e")
    >>> engine.init_session(42)
    >>> check = engine.ability_check(
    ...     {"actor_id": "pc1", "skill": "athletics", "difficulty": 12}
    ... )
    >>> damage = engine.damage_roll("2d6+3")
    >>> order = engine.turn_order(["pc1", "pc2", "goblin"])

Modules:
    core: Configuration, logging, and base exceptions.
    engine: Dice notation, the RulesEngine contract, factory and adapters.
    smoke: One-shot diagnostic run of the full interface.
"""

from __future__ import annotations

# Core
from tabletop_rules.core.config import Settings, get_settings
from tabletop_rules.core.exceptions import (
    ParseError,
    RulesEngineError,
    UninitializedSessionError,
    UnsupportedSystemError,
)
from tabletop_rules.core.logging import configure_logging, get_logger

# Engine
from tabletop_rules.engine import (
    AbilityCheckRequest,
    AbilityCheckResult,
    DnD5eEngine,
    PbtaEngine,
    RulesEngine,
    SystemKind,
    TurnOrderEntry,
    make_engine,
    parse,
    roll,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "RulesEngineError",
    "ParseError",
    "UnsupportedSystemError",
    "UninitializedSessionError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "RulesEngine",
    "SystemKind",
    "AbilityCheckRequest",
    "AbilityCheckResult",
    "TurnOrderEntry",
    "DnD5eEngine",
    "PbtaEngine",
    "make_engine",
    "parse",
    "roll",
]
