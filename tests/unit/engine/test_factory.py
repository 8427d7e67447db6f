"""Tests for engine selection."""

from __future__ import annotations

import pytest

from tabletop_rules.core.config import EngineSettings, Settings
from tabletop_rules.core.exceptions import UninitializedSessionError, UnsupportedSystemError
from tabletop_rules.engine.adapters import DnD5eEngine, PbtaEngine
from tabletop_rules.engine.contract import RulesEngine, SystemKind
from tabletop_rules.engine.factory import (
    available_systems,
    engine_from_settings,
    make_engine,
    resolve_system,
)


class TestMakeEngine:
    """Tests for make_engine."""

    @pytest.mark.parametrize(
        ("kind", "engine_type"),
        [
            ("dnd5e", DnD5eEngine),
            ("pbta", PbtaEngine),
            (SystemKind.DND5E, DnD5eEngine),
            ("  PBTA ", PbtaEngine),
        ],
    )
    def test_builds_requested_adapter(self, kind: str, engine_type: type) -> None:
        engine = make_engine(kind)

        assert isinstance(engine, engine_type)
        assert isinstance(engine, RulesEngine)

    @pytest.mark.parametrize("kind", ["unknown-system", "", "blades", "d&d"])
    def test_unknown_kind_raises(self, kind: str) -> None:
        with pytest.raises(UnsupportedSystemError) as exc_info:
            make_engine(kind)

        assert exc_info.value.details["supported"] == ["dnd5e", "pbta"]

    def test_non_string_kind_raises(self) -> None:
        with pytest.raises(UnsupportedSystemError):
            make_engine(None)  # type: ignore[arg-type]

    def test_each_call_is_a_fresh_engine(self) -> None:
        first = make_engine("dnd5e")
        second = make_engine("dnd5e")
        first.init_session(1)

        assert first is not second
        # The second engine's session is untouched by the first.
        with pytest.raises(UninitializedSessionError):
            second.damage_roll("1d6")

    def test_passes_modifiers(self, scripted) -> None:
        engine = make_engine("pbta", modifiers={"pc1": {"hot": 2}}, rng_factory=scripted(4, 4))
        engine.init_session(0)

        assert engine.ability_check({"actor_id": "pc1", "skill": "hot"}).total == 10


class TestResolveSystem:
    """Tests for system key resolution."""

    def test_available_systems(self) -> None:
        assert available_systems() == ["dnd5e", "pbta"]

    def test_case_insensitive(self) -> None:
        assert resolve_system("DnD5e") is SystemKind.DND5E


class TestEngineFromSettings:
    """Tests for building the configured engine."""

    def test_uses_configured_system(self) -> None:
        settings = Settings(engine=EngineSettings(system="pbta"))

        assert isinstance(engine_from_settings(settings), PbtaEngine)

    def test_unknown_configured_system_is_fatal(self) -> None:
        settings = Settings(engine=EngineSettings(system="fate"))

        with pytest.raises(UnsupportedSystemError):
            engine_from_settings(settings)

    @pytest.mark.usefixtures("isolated_env")
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RULES_ENGINE_SYSTEM", "pbta")

        assert isinstance(engine_from_settings(), PbtaEngine)
