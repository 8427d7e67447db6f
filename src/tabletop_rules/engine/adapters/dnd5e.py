"""D20 rules adapter (D&D 5E style mechanics).

Ability checks roll 1d20 plus the actor's skill modifier against a
difficulty. A natural 20 always succeeds and a natural 1 always fails;
the override looks at the raw die, not the modified total. Damage is the
plain total of a dice expression with no resistances or vulnerabilities
applied (the host owns those). Turn order is 1d20 initiative per actor,
highest first, ties kept in input order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from tabletop_rules.core.constants import (
    D20_SIDES,
    DEFAULT_D20_DIFFICULTY,
    DEFAULT_INITIATIVE_DEX_MOD,
    NATURAL_CRITICAL,
    NATURAL_FUMBLE,
)
from tabletop_rules.core.logging import get_logger, session_logger
from tabletop_rules.engine.contract import SystemKind
from tabletop_rules.engine.dice import DiceExpression, roll
from tabletop_rules.engine.modifiers import ModifierTable, SkillModifiers
from tabletop_rules.engine.models import (
    AbilityCheckRequest,
    AbilityCheckResult,
    TurnOrderEntry,
    as_request,
)
from tabletop_rules.engine.session import RNGFactory, Session, require_session
from tabletop_rules.engine.turns import check_actor_ids, rank_by_initiative


logger = get_logger(__name__)

CHECK_DIE = DiceExpression(count=1, sides=D20_SIDES)
INITIATIVE_DIE = DiceExpression(
    count=1, sides=D20_SIDES, modifier=DEFAULT_INITIATIVE_DEX_MOD
)


class DnD5eEngine:
    """Rules engine for d20 systems.

    Example:
        >>> engine = DnD5eEngine()
        >>> engine.init_session(42)
        >>> result = engine.ability_check(
        ...     {"actor_id": "pc1", "skill": "athletics", "difficulty": 12}
        ... )
        >>> 1 <= result.roll <= 20
        True
    """

    def __init__(
        self,
        *,
        modifiers: SkillModifiers | ModifierTable | None = None,
        rng_factory: RNGFactory | None = None,
    ) -> None:
        """Initialize the engine without a session.

        Args:
            modifiers: Known skill modifiers per actor; anything missing
                resolves to 0.
            rng_factory: Alternative random source constructor for the
                sessions this engine opens.
        """
        if isinstance(modifiers, ModifierTable):
            self._modifiers = modifiers
        else:
            self._modifiers = ModifierTable(modifiers)
        self._rng_factory = rng_factory
        self._session: Session | None = None
        self._log = logger

    @property
    def system(self) -> SystemKind:
        return SystemKind.DND5E

    def init_session(self, seed: int) -> None:
        """Start a new session, discarding any previous one."""
        self._session = Session.open(seed, self._rng_factory)
        self._log = session_logger(__name__, system=self.system.value, seed=seed)
        self._log.info("Session started")

    def ability_check(
        self,
        request: AbilityCheckRequest | Mapping[str, Any],
    ) -> AbilityCheckResult:
        """Roll 1d20 + skill modifier against the request's difficulty.

        Args:
            request: The check to resolve. A missing difficulty uses
                DEFAULT_D20_DIFFICULTY.

        Returns:
            The check outcome. ``roll`` is the natural d20.

        Raises:
            UninitializedSessionError: If no session has been started.
            ValidationError: If the request does not describe a check.
        """
        session = require_session(
            self._session, system=self.system.value, operation="ability_check"
        )
        request = as_request(request)
        difficulty = DEFAULT_D20_DIFFICULTY if request.difficulty is None else request.difficulty

        natural = roll(CHECK_DIE, session.tick()).total
        modifier = self._modifiers.get(request.actor_id, request.skill)
        total = natural + modifier

        if natural == NATURAL_CRITICAL:
            success = True
        elif natural == NATURAL_FUMBLE:
            success = False
        else:
            success = total >= difficulty

        result = AbilityCheckResult(
            success=success,
            roll=natural,
            total=total,
            margin=total - difficulty,
        )
        self._log.debug(
            "Ability check resolved",
            actor_id=request.actor_id,
            skill=request.skill,
            difficulty=difficulty,
            roll=natural,
            total=total,
            success=success,
        )
        return result

    def damage_roll(self, expression: str) -> int:
        """Roll a damage expression and return its total.

        Raises:
            ParseError: If the expression is not valid dice notation.
            UninitializedSessionError: If no session has been started.
        """
        session = require_session(
            self._session, system=self.system.value, operation="damage_roll"
        )
        result = roll(expression, session.tick())
        self._log.debug(
            "Damage rolled",
            expression=result.expression.notation,
            rolls=list(result.rolls),
            total=result.total,
        )
        return result.total

    def turn_order(self, actor_ids: Sequence[str]) -> list[TurnOrderEntry]:
        """Roll 1d20 initiative per actor and order highest first.

        Initiative is rolled in input order, so the draws (and therefore
        the result) depend only on the seed and the call sequence.

        Raises:
            UninitializedSessionError: If no session has been started.
            ValidationError: If ``actor_ids`` is not a sequence of strings.
        """
        session = require_session(
            self._session, system=self.system.value, operation="turn_order"
        )
        actors = check_actor_ids(actor_ids)
        rng = session.tick()

        rolled = [(actor_id, roll(INITIATIVE_DIE, rng).total) for actor_id in actors]
        order = rank_by_initiative(rolled)

        self._log.debug(
            "Turn order rolled",
            order=[(entry.actor_id, entry.initiative) for entry in order],
        )
        return order

    def __repr__(self) -> str:
        seed = self._session.seed if self._session else None
        return f"DnD5eEngine(seed={seed})"


__all__ = [
    "DnD5eEngine",
]
