"""Tests for src/hero_arena/mechanics/abilities.py."""
from __future__ import annotations

import pytest

from hero_arena.errors import ContractError
from hero_arena.mechanics.abilities import ABILITY_NAMES, describe_abilities, resolve
from hero_arena.models.hero import Ability, AbilityEffects, AbilityKind


class TestResolve:
    @pytest.mark.parametrize("name, expected", [
        ("strike", AbilityKind.STRIKE),
        ("headbonk", AbilityKind.HEAD_BONK),
        ("bonk", AbilityKind.HEAD_BONK),
        ("heal", AbilityKind.HEAL),
        ("ultimate", AbilityKind.ULTIMATE),
        ("ult", AbilityKind.ULTIMATE),
    ])
    def test_known_names(self, name, expected):
        assert resolve(name) == expected

    def test_aliases_agree(self):
        assert resolve("bonk") == resolve("headbonk")
        assert resolve("ult") == resolve("ultimate")

    def test_canonical_names_are_distinct(self):
        kinds = {resolve(n) for n in ABILITY_NAMES}
        assert len(kinds) == 4
        assert None not in kinds

    @pytest.mark.parametrize("name", ["", "Strike", "STRIKE", "fireball", " strike"])
    def test_unknown_names(self, name):
        assert resolve(name) is None


class TestAbilityKindMatching:
    def test_payload_ignored(self):
        weak = Ability(kind=AbilityKind.STRIKE, effects=AbilityEffects(target_damage=1))
        assert weak.is_kind(AbilityKind.STRIKE)
        assert not weak.is_kind(AbilityKind.HEAL)


class TestDescribeAbilities:
    def test_catalog(self):
        assert describe_abilities() == "strike, headbonk, heal, or ultimate"

    def test_each_name_once(self):
        text = describe_abilities()
        for name in ABILITY_NAMES:
            assert text.count(name) == 1

    def test_two_names(self):
        assert describe_abilities(["a", "b"]) == "a, or b"

    def test_single_name(self):
        assert describe_abilities(["a"]) == "a"

    def test_empty_raises(self):
        with pytest.raises(ContractError) as exc_info:
            describe_abilities([])
        assert exc_info.value.code == "INVALID_ABILITIES"
