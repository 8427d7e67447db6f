"""Skill modifier lookup for the system adapters.

The engine is not authoritative over character data. A host that knows
an actor's skill or stat bonuses can hand them to the engine at
construction time; anything it does not know resolves to zero.
"""

from __future__ import annotations

from collections.abc import Mapping

from tabletop_rules.core.logging import get_logger


logger = get_logger(__name__)

SkillModifiers = Mapping[str, Mapping[str, int]]
"""Actor id -> skill name -> modifier."""


class ModifierTable:
    """Immutable per-actor skill modifiers with neutral defaults.

    Skill names are matched case-insensitively. Modifiers listed under
    ``defaults`` apply to every actor that has no entry of its own for
    that skill.

    Example:
        >>> table = ModifierTable({"pc1": {"Athletics": 3}})
        >>> table.get("pc1", "athletics")
        3
        >>> table.get("goblin", "athletics")
        0
    """

    def __init__(
        self,
        by_actor: SkillModifiers | None = None,
        *,
        defaults: Mapping[str, int] | None = None,
    ) -> None:
        self._by_actor: dict[str, dict[str, int]] = {
            actor_id: _normalize(skills) for actor_id, skills in (by_actor or {}).items()
        }
        self._defaults = _normalize(defaults or {})

    def get(self, actor_id: str, skill: str) -> int:
        """Return the modifier for ``skill`` on ``actor_id``, or 0 if unknown."""
        key = skill.strip().lower()
        actor_skills = self._by_actor.get(actor_id, {})
        if key in actor_skills:
            return actor_skills[key]
        if key in self._defaults:
            return self._defaults[key]
        logger.debug("No modifier known, using 0", actor_id=actor_id, skill=skill)
        return 0

    def __len__(self) -> int:
        return len(self._by_actor)


def _normalize(skills: Mapping[str, int]) -> dict[str, int]:
    return {name.strip().lower(): int(value) for name, value in skills.items()}


__all__ = [
    "SkillModifiers",
    "ModifierTable",
]
