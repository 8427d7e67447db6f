"""Powered by the Apocalypse rules adapter.

Every move is 2d6 plus a stat. The result falls into one of three
narrative tiers:

    10+   full success
    7-9   partial success (success at a cost)
    6-    miss

The shared AbilityCheckResult only carries a boolean, so both success
tiers map to ``success=True``. The tier can still be read back from the
total with :func:`outcome_tier`, or from the margin when the default
threshold of 7 was used (a margin of 3 or more is a full success).

PbtA has no initiative subsystem. This adapter keeps the actors in the
order the host supplied them: every entry gets initiative 0 and its
input position as rank, and no dice are drawn. The spotlight moves as
the fiction dictates, and the host already knows that order best.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from tabletop_rules.core.constants import (
    PBTA_DICE,
    PBTA_FULL_SUCCESS,
    PBTA_MIXED_THRESHOLD,
)
from tabletop_rules.core.logging import get_logger, session_logger
from tabletop_rules.engine.contract import SystemKind
from tabletop_rules.engine.dice import parse, roll
from tabletop_rules.engine.modifiers import ModifierTable, SkillModifiers
from tabletop_rules.engine.models import (
    AbilityCheckRequest,
    AbilityCheckResult,
    TurnOrderEntry,
    as_request,
)
from tabletop_rules.engine.session import RNGFactory, Session, require_session
from tabletop_rules.engine.turns import check_actor_ids


logger = get_logger(__name__)

MOVE_DICE = parse(PBTA_DICE)


class OutcomeTier(StrEnum):
    """The three results of a PbtA move."""

    FULL = "full"
    PARTIAL = "partial"
    MISS = "miss"


def outcome_tier(total: int) -> OutcomeTier:
    """Classify a move total into its narrative tier."""
    if total >= PBTA_FULL_SUCCESS:
        return OutcomeTier.FULL
    if total >= PBTA_MIXED_THRESHOLD:
        return OutcomeTier.PARTIAL
    return OutcomeTier.MISS


class PbtaEngine:
    """Rules engine for Powered by the Apocalypse systems.

    Stats (cool, hard, hot, sharp, weird, or whatever the playbook uses)
    are looked up the same way d20 skills are: by name, per actor, with
    0 for anything unknown.
    """

    def __init__(
        self,
        *,
        modifiers: SkillModifiers | ModifierTable | None = None,
        rng_factory: RNGFactory | None = None,
    ) -> None:
        if isinstance(modifiers, ModifierTable):
            self._modifiers = modifiers
        else:
            self._modifiers = ModifierTable(modifiers)
        self._rng_factory = rng_factory
        self._session: Session | None = None
        self._log = logger

    @property
    def system(self) -> SystemKind:
        return SystemKind.PBTA

    def init_session(self, seed: int) -> None:
        """Start a new session, discarding any previous one."""
        self._session = Session.open(seed, self._rng_factory)
        self._log = session_logger(__name__, system=self.system.value, seed=seed)
        self._log.info("Session started")

    def ability_check(
        self,
        request: AbilityCheckRequest | Mapping[str, Any],
    ) -> AbilityCheckResult:
        """Roll 2d6 + stat and fold the tier onto the shared result.

        ``success`` is True for both full and partial successes. The
        margin is measured against the request's difficulty when it is
        a positive number and against the mixed threshold (7) otherwise.

        Raises:
            UninitializedSessionError: If no session has been started.
            ValidationError: If the request does not describe a check.
        """
        session = require_session(
            self._session, system=self.system.value, operation="ability_check"
        )
        request = as_request(request)
        threshold = request.difficulty
        if threshold is None or threshold < 1:
            threshold = PBTA_MIXED_THRESHOLD

        dice = roll(MOVE_DICE, session.tick()).total
        total = dice + self._modifiers.get(request.actor_id, request.skill)
        tier = outcome_tier(total)

        result = AbilityCheckResult(
            success=tier is not OutcomeTier.MISS,
            roll=dice,
            total=total,
            margin=total - threshold,
        )
        self._log.debug(
            "Move resolved",
            actor_id=request.actor_id,
            stat=request.skill,
            roll=dice,
            total=total,
            tier=tier.value,
        )
        return result

    def tier_of(self, result: AbilityCheckResult) -> OutcomeTier:
        """Recover the full/partial/miss tier of a result from this engine."""
        return outcome_tier(result.total)

    def damage_roll(self, expression: str) -> int:
        """Roll a dice expression and return its total.

        PbtA play usually narrates harm instead of rolling it; this path
        exists for campaigns that mix systems.

        Raises:
            ParseError: If the expression is not valid dice notation.
            UninitializedSessionError: If no session has been started.
        """
        session = require_session(
            self._session, system=self.system.value, operation="damage_roll"
        )
        result = roll(expression, session.tick())
        self._log.debug(
            "Harm rolled",
            expression=result.expression.notation,
            total=result.total,
        )
        return result.total

    def turn_order(self, actor_ids: Sequence[str]) -> list[TurnOrderEntry]:
        """Keep the host's order; initiative is 0 for every actor.

        Raises:
            UninitializedSessionError: If no session has been started.
            ValidationError: If ``actor_ids`` is not a sequence of strings.
        """
        session = require_session(
            self._session, system=self.system.value, operation="turn_order"
        )
        actors = check_actor_ids(actor_ids)
        session.tick()
        return [
            TurnOrderEntry(actor_id=actor_id, initiative=0, rank=rank)
            for rank, actor_id in enumerate(actors, start=1)
        ]

    def __repr__(self) -> str:
        seed = self._session.seed if self._session else None
        return f"PbtaEngine(seed={seed})"


__all__ = [
    "OutcomeTier",
    "outcome_tier",
    "PbtaEngine",
]
