"""Per-engine game session state.

A session is created by ``init_session(seed)``, lives for one combat or
game session, and is replaced wholesale by the next ``init_session``
call. It is owned by exactly one engine instance; nothing outside that
engine reads or mutates it.

Sessions are not thread-safe. A host must build one engine per
concurrent game session rather than share an instance across requests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from tabletop_rules.core.exceptions import UninitializedSessionError
from tabletop_rules.engine.dice import RandomSource, SeededRNG, check_seed


RNGFactory = Callable[[int], RandomSource]
"""Builds a session's random source from its seed."""


@dataclass
class Session:
    """Seeded random state for one game session.

    Attributes:
        seed: The seed the session was opened with.
        rng: The session's random source.
        calls: Number of engine operations resolved in this session.
    """

    seed: int
    rng: RandomSource
    calls: int = field(default=0)

    @classmethod
    def open(cls, seed: int, rng_factory: RNGFactory | None = None) -> Session:
        """Create a fresh session from a seed.

        Args:
            seed: Integer seed for the session's random source.
            rng_factory: Alternative random source constructor, mainly
                for tests that need to script exact die results.

        Raises:
            ValidationError: If the seed is not an integer.
        """
        check_seed(seed)
        factory = rng_factory or SeededRNG
        return cls(seed=seed, rng=factory(seed))

    def tick(self) -> RandomSource:
        """Count one operation and return the random source to draw from."""
        self.calls += 1
        return self.rng


def require_session(session: Session | None, *, system: str, operation: str) -> Session:
    """Return ``session``, or fail if ``init_session`` has not been called.

    Raises:
        UninitializedSessionError: If ``session`` is None.
    """
    if session is None:
        raise UninitializedSessionError(
            f"init_session() must be called before {operation}()",
            system=system,
            operation=operation,
        )
    return session


__all__ = [
    "RNGFactory",
    "Session",
    "require_session",
]
