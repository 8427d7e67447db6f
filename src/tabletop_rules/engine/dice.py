"""Dice notation parsing and seeded evaluation.

This module implements the only textual protocol the engine exposes:
dice notation of the form ``<count>d<sides>[+|-<modifier>]``, for example
``"2d6+3"``, ``"1d20"`` or ``"4d4-1"``. The ``d`` is case-insensitive and
no whitespace is accepted anywhere in the expression.

Rolls are drawn from a seeded, deterministic generator owned by a game
session. The generator is not cryptographically secure: the same seed
and the same sequence of calls always yield the same dice, which is what
makes a disputed roll ("why did this attack miss?") replayable.

Example:
    >>> rng = SeededRNG(42)
    >>> result = roll("2d6+3", rng)
    >>> 5 <= result.total <= 15
    True
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from tabletop_rules.core.constants import (
    MAX_DICE_COUNT,
    MAX_DICE_MODIFIER,
    MAX_DICE_SIDES,
    MAX_NOTATION_DIGITS,
    MIN_DICE_COUNT,
    MIN_DICE_SIDES,
)
from tabletop_rules.core.exceptions import ParseError, ValidationError
from tabletop_rules.core.logging import get_logger


logger = get_logger(__name__)

# ASCII digits only; str.isdigit and \d both accept other scripts' numerals.
_DICE_PATTERN = re.compile(
    r"(?P<count>[0-9]+)[dD](?P<sides>[0-9]+)"
    r"(?:(?P<sign>[+-])(?P<modifier>[0-9]+))?"
)


# =============================================================================
# Random Sources
# =============================================================================


def check_seed(seed: int) -> int:
    """Return ``seed`` unchanged if it is a usable session seed.

    Raises:
        ValidationError: If the seed is not an integer. Booleans are
            rejected even though they are ints.
    """
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValidationError(
            "Session seed must be an integer",
            field_name="seed",
            invalid_value=seed,
        )
    return seed


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a uniform integer in a closed range."""

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer N with ``low <= N <= high``."""
        ...


class SeededRNG:
    """Deterministic pseudo-random source for one game session.

    Wraps a private ``random.Random`` instance so that sessions never
    share, or disturb, the interpreter-wide random state.

    Attributes:
        seed: The integer the generator was initialised with.
        draws: How many values have been drawn so far.
    """

    def __init__(self, seed: int) -> None:
        """Initialize the generator.

        Args:
            seed: Integer seed.

        Raises:
            ValidationError: If the seed is not an integer.
        """
        self.seed = check_seed(seed)
        self.draws = 0
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """Draw a uniform integer in ``[low, high]``."""
        self.draws += 1
        return self._random.randint(low, high)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self.seed}, draws={self.draws})"


# =============================================================================
# Parsed Expressions & Results
# =============================================================================


@dataclass(frozen=True)
class DiceExpression:
    """A parsed dice expression.

    Attributes:
        count: Number of dice to roll (at least 1).
        sides: Sides on each die (at least 2).
        modifier: Signed static modifier added to the dice sum.
    """

    count: int
    sides: int
    modifier: int = 0

    @property
    def notation(self) -> str:
        """Canonical text form, e.g. ``'2d6+3'`` or ``'1d20'``."""
        if self.modifier > 0:
            return f"{self.count}d{self.sides}+{self.modifier}"
        if self.modifier < 0:
            return f"{self.count}d{self.sides}{self.modifier}"
        return f"{self.count}d{self.sides}"

    @property
    def minimum(self) -> int:
        """Smallest possible total."""
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        """Largest possible total."""
        return self.count * self.sides + self.modifier

    def __str__(self) -> str:
        return self.notation


@dataclass(frozen=True)
class RollResult:
    """The outcome of evaluating a dice expression once.

    Attributes:
        expression: The expression that was rolled.
        rolls: Individual die results, in the order they were drawn.
        total: Sum of the rolls plus the expression's modifier.
    """

    expression: DiceExpression
    rolls: tuple[int, ...]
    total: int


# =============================================================================
# Parsing & Evaluation
# =============================================================================


def parse(expression: str) -> DiceExpression:
    """Parse dice notation into a DiceExpression.

    Args:
        expression: Text such as ``'2d6+3'``, ``'1D20'`` or ``'4d4-1'``.

    Returns:
        The parsed, immutable expression.

    Raises:
        ParseError: On a syntax mismatch (including any whitespace), a
            dice count below 1, fewer than 2 sides, or a count or side
            number beyond the supported limits (including a modifier over
            MAX_DICE_MODIFIER or any number longer than MAX_NOTATION_DIGITS).
    """
    if not isinstance(expression, str):
        raise ParseError(
            f"Dice expression must be a string, got {type(expression).__name__}",
            expression=repr(expression),
        )
    if not expression.strip():
        raise ParseError("Empty dice expression", expression=expression)

    match = _DICE_PATTERN.fullmatch(expression)
    if match is None:
        raise ParseError(
            "Invalid dice expression, expected <count>d<sides>[+|-<modifier>]",
            expression=expression,
        )

    # Must run before int(): very long digit runs raise ValueError there.
    numbers = [digits for digits in match.group("count", "sides", "modifier") if digits]
    if any(len(digits) > MAX_NOTATION_DIGITS for digits in numbers):
        raise ParseError(
            f"Dice expression numbers are limited to {MAX_NOTATION_DIGITS} digits",
            expression=expression,
        )

    count = int(match.group("count"))
    sides = int(match.group("sides"))
    modifier = int(match.group("modifier") or 0)
    if match.group("sign") == "-":
        modifier = -modifier

    if count < MIN_DICE_COUNT:
        raise ParseError(
            f"Dice count must be at least {MIN_DICE_COUNT}",
            expression=expression,
            details={"count": count},
        )
    if sides < MIN_DICE_SIDES:
        raise ParseError(
            f"Dice must have at least {MIN_DICE_SIDES} sides",
            expression=expression,
            details={"sides": sides},
        )
    if count > MAX_DICE_COUNT or sides > MAX_DICE_SIDES:
        raise ParseError(
            f"Dice expression exceeds limits ({MAX_DICE_COUNT} dice, {MAX_DICE_SIDES} sides)",
            expression=expression,
            details={"count": count, "sides": sides},
        )
    if abs(modifier) > MAX_DICE_MODIFIER:
        raise ParseError(
            f"Dice modifier exceeds limit ({MAX_DICE_MODIFIER})",
            expression=expression,
            details={"modifier": modifier},
        )

    return DiceExpression(count=count, sides=sides, modifier=modifier)


def roll(expression: str | DiceExpression, rng: RandomSource) -> RollResult:
    """Evaluate a dice expression against a random source.

    Draws ``count`` independent integers in ``[1, sides]`` from ``rng``,
    sums them and adds the modifier.

    Args:
        expression: Dice notation text, or an already parsed expression.
        rng: The session's random source.

    Returns:
        A fresh RollResult.

    Raises:
        ParseError: If ``expression`` is text that does not parse.
    """
    parsed = expression if isinstance(expression, DiceExpression) else parse(expression)

    rolls = tuple(rng.randint(1, parsed.sides) for _ in range(parsed.count))
    total = sum(rolls) + parsed.modifier

    logger.debug(
        "Dice rolled",
        expression=parsed.notation,
        rolls=list(rolls),
        total=total,
    )

    return RollResult(expression=parsed, rolls=rolls, total=total)


__all__ = [
    "RandomSource",
    "check_seed",
    "SeededRNG",
    "DiceExpression",
    "RollResult",
    "parse",
    "roll",
]
