"""The capability interface every rule system adapter provides.

Adapters satisfy RulesEngine structurally; there is no shared base
class. A host only ever talks to an engine through these four methods:

    engine.init_session(seed)
    engine.ability_check(request)
    engine.damage_roll(expression)
    engine.turn_order(actor_ids)

``init_session`` must be called first. Every other method raises
UninitializedSessionError until it has been.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from tabletop_rules.engine.models import (
    AbilityCheckRequest,
    AbilityCheckResult,
    TurnOrderEntry,
)


class SystemKind(StrEnum):
    """Rule system families the factory can build."""

    DND5E = "dnd5e"
    PBTA = "pbta"


@runtime_checkable
class RulesEngine(Protocol):
    """Objective game mechanics for one rule system."""

    @property
    def system(self) -> SystemKind:
        """The rule system this engine implements."""
        ...

    def init_session(self, seed: int) -> None:
        """Start (or restart) the session, seeding its random source."""
        ...

    def ability_check(
        self,
        request: AbilityCheckRequest | Mapping[str, Any],
    ) -> AbilityCheckResult:
        """Resolve a single check against a target difficulty."""
        ...

    def damage_roll(self, expression: str) -> int:
        """Roll a dice expression and return the integer total."""
        ...

    def turn_order(self, actor_ids: Sequence[str]) -> list[TurnOrderEntry]:
        """Order the given actors for an encounter."""
        ...


__all__ = [
    "SystemKind",
    "RulesEngine",
]
