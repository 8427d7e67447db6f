"""Engine selection by rule system key.

``make_engine`` is a plain constructor: each call returns a new engine
with its own modifiers and no session, so engines of different kinds
(or of the same kind) never share mutable state. The active system is
passed in explicitly; ``engine_from_settings`` is the one place that
reads it from configuration.

Example:
    >>> engine = make_engine("dnd5e")
    >>> engine.init_session(42)
    >>> engine.damage_roll("2d6+3") in range(5, 16)
    True
"""

from __future__ import annotations

from collections.abc import Callable

from tabletop_rules.core.config import Settings, get_settings
from tabletop_rules.core.exceptions import UnsupportedSystemError
from tabletop_rules.core.logging import get_logger
from tabletop_rules.engine.adapters import DnD5eEngine, PbtaEngine
from tabletop_rules.engine.contract import RulesEngine, SystemKind
from tabletop_rules.engine.modifiers import ModifierTable, SkillModifiers
from tabletop_rules.engine.session import RNGFactory


logger = get_logger(__name__)

_ENGINES: dict[SystemKind, Callable[..., RulesEngine]] = {
    SystemKind.DND5E: DnD5eEngine,
    SystemKind.PBTA: PbtaEngine,
}


def available_systems() -> list[str]:
    """Return the system keys ``make_engine`` accepts."""
    return [kind.value for kind in _ENGINES]


def resolve_system(kind: str | SystemKind) -> SystemKind:
    """Map a system key onto a SystemKind.

    Keys are matched case-insensitively, ignoring surrounding whitespace.

    Raises:
        UnsupportedSystemError: If the key names no known system.
    """
    if isinstance(kind, SystemKind):
        return kind
    key = kind.strip().lower() if isinstance(kind, str) else kind
    try:
        return SystemKind(key)
    except ValueError as exc:
        raise UnsupportedSystemError(
            f"Unsupported rule system: {kind!r}",
            system=str(kind),
            supported=available_systems(),
        ) from exc


def make_engine(
    kind: str | SystemKind,
    *,
    modifiers: SkillModifiers | ModifierTable | None = None,
    rng_factory: RNGFactory | None = None,
) -> RulesEngine:
    """Build a fresh engine for the given rule system.

    Args:
        kind: System key, ``"dnd5e"`` or ``"pbta"``.
        modifiers: Known skill or stat modifiers per actor.
        rng_factory: Alternative random source constructor for sessions.

    Returns:
        A new engine with no session; call ``init_session`` next.

    Raises:
        UnsupportedSystemError: If ``kind`` is not a known system. No
            engine is constructed in that case.
    """
    system = resolve_system(kind)
    engine = _ENGINES[system](modifiers=modifiers, rng_factory=rng_factory)
    logger.debug("Engine created", system=system.value)
    return engine


def engine_from_settings(
    settings: Settings | None = None,
    *,
    modifiers: SkillModifiers | ModifierTable | None = None,
) -> RulesEngine:
    """Build the engine named by the process configuration.

    Raises:
        UnsupportedSystemError: If the configured system is unknown.
        ConfigurationError: If settings cannot be loaded.
    """
    settings = settings or get_settings()
    return make_engine(settings.engine.system, modifiers=modifiers)


__all__ = [
    "available_systems",
    "resolve_system",
    "make_engine",
    "engine_from_settings",
]
