"""Tests for session state and the modifier table."""

from __future__ import annotations

import pytest

from tabletop_rules.core.exceptions import UninitializedSessionError, ValidationError
from tabletop_rules.engine.dice import SeededRNG
from tabletop_rules.engine.modifiers import ModifierTable
from tabletop_rules.engine.session import Session, require_session


class TestSession:
    """Tests for Session."""

    def test_open_uses_seeded_rng_by_default(self) -> None:
        session = Session.open(42)

        assert session.seed == 42
        assert isinstance(session.rng, SeededRNG)
        assert session.rng.seed == 42
        assert session.calls == 0

    def test_open_with_factory(self, scripted) -> None:
        session = Session.open(9, scripted(4))

        assert session.rng.randint(1, 6) == 4

    def test_tick_counts_calls(self) -> None:
        session = Session.open(1)

        assert session.tick() is session.rng
        session.tick()

        assert session.calls == 2

    def test_open_rejects_bad_seed_even_with_factory(self, scripted) -> None:
        with pytest.raises(ValidationError):
            Session.open("seed", scripted())  # type: ignore[arg-type]


class TestRequireSession:
    """Tests for require_session."""

    def test_returns_session(self) -> None:
        session = Session.open(1)

        assert require_session(session, system="dnd5e", operation="damage_roll") is session

    def test_raises_without_session(self) -> None:
        with pytest.raises(UninitializedSessionError) as exc_info:
            require_session(None, system="pbta", operation="ability_check")

        assert exc_info.value.details == {"system": "pbta", "operation": "ability_check"}
        assert "ability_check()" in exc_info.value.message


class TestModifierTable:
    """Tests for ModifierTable."""

    def test_known_modifier(self) -> None:
        table = ModifierTable({"pc1": {"athletics": 5}})

        assert table.get("pc1", "athletics") == 5

    def test_skill_names_are_case_insensitive(self) -> None:
        table = ModifierTable({"pc1": {"Sleight_of_Hand": 4}})

        assert table.get("pc1", "SLEIGHT_OF_HAND") == 4
        assert table.get("pc1", " sleight_of_hand ") == 4

    def test_unknown_actor_and_skill_are_zero(self) -> None:
        table = ModifierTable({"pc1": {"athletics": 5}})

        assert table.get("pc1", "arcana") == 0
        assert table.get("ghost", "athletics") == 0
        assert ModifierTable().get("anyone", "anything") == 0

    def test_defaults_apply_when_actor_has_no_entry(self) -> None:
        table = ModifierTable({"pc1": {"hard": 2}}, defaults={"hard": -1, "cool": 1})

        assert table.get("pc1", "hard") == 2
        assert table.get("pc1", "cool") == 1
        assert table.get("npc", "hard") == -1

    def test_copies_input(self) -> None:
        source = {"pc1": {"athletics": 5}}
        table = ModifierTable(source)

        source["pc1"]["athletics"] = 99

        assert table.get("pc1", "athletics") == 5
        assert len(table) == 1
