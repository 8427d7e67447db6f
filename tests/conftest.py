"""Pytest configuration and shared fixtures.

This module provides common fixtures for the rules engine test suite,
including random sources that replay a fixed script of die results.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from tabletop_rules.engine.session import RNGFactory


class ScriptedRNG:
    """Random source that returns pre-set values in order.

    Each value is checked against the requested range so that a test
    cannot script an impossible die result.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.requests: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.requests.append((low, high))
        if not self._values:
            raise AssertionError("ScriptedRNG ran out of values")
        value = self._values.pop(0)
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from tabletop_rules.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no RULES_ENGINE_* variables set."""
    import os

    for key in list(os.environ):
        if key.startswith("RULES_ENGINE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def scripted() -> Callable[..., RNGFactory]:
    """Build an rng_factory whose sessions replay the given die results.

    Example:
        >>> engine = DnD5eEngine(rng_factory=scripted(20))
    """

    def factory(*values: int) -> RNGFactory:
        return lambda seed: ScriptedRNG(values)

    return factory


@pytest.fixture
def dnd5e_engine() -> object:
    """A d20 engine with a session seeded at 42."""
    from tabletop_rules.engine.adapters.dnd5e import DnD5eEngine

    engine = DnD5eEngine()
    engine.init_session(42)
    return engine


@pytest.fixture
def pbta_engine() -> object:
    """A PbtA engine with a session seeded at 42."""
    from tabletop_rules.engine.adapters.pbta import PbtaEngine

    engine = PbtaEngine()
    engine.init_session(42)
    return engine


@pytest.fixture(params=["dnd5e", "pbta"])
def system_kind(request: pytest.FixtureRequest) -> str:
    """Every supported system key."""
    return request.param
