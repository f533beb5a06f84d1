"""Tests for src/hero_arena/mechanics/heroes.py."""
from __future__ import annotations

import pytest

from hero_arena.mechanics.abilities import resolve
from hero_arena.mechanics.heroes import find_class_ability, get_base_stats, get_hero_abilities
from hero_arena.models.hero import AbilityEffects, AbilityKind, HeroClass


class TestGetBaseStats:
    @pytest.mark.parametrize("hero_class, expected", [
        (HeroClass.OGRE, (150, 1)),
        (HeroClass.MAGE, (100, 3)),
        (HeroClass.CLERIC, (80, 5)),
    ])
    def test_base_stats(self, hero_class, expected):
        assert get_base_stats(hero_class) == expected


class TestGetHeroAbilities:
    @pytest.mark.parametrize("hero_class", list(HeroClass))
    def test_non_empty(self, hero_class):
        assert len(get_hero_abilities(hero_class)) > 0

    @pytest.mark.parametrize("hero_class", list(HeroClass))
    def test_no_duplicate_kinds(self, hero_class):
        kinds = [a.kind for a in get_hero_abilities(hero_class)]
        assert len(kinds) == len(set(kinds))

    @pytest.mark.parametrize("hero_class", list(HeroClass))
    def test_kinds_are_in_catalog(self, hero_class):
        for ability in get_hero_abilities(hero_class):
            assert resolve(ability.kind.value) == ability.kind

    def test_ogre_order_and_tuning(self):
        abilities = get_hero_abilities(HeroClass.OGRE)
        assert [a.kind for a in abilities] == [
            AbilityKind.STRIKE, AbilityKind.HEAD_BONK, AbilityKind.ULTIMATE,
        ]
        assert abilities[1].effects == AbilityEffects(target_damage=25, self_damage=5)

    def test_returns_fresh_list(self):
        first = get_hero_abilities(HeroClass.MAGE)
        first.clear()
        assert get_hero_abilities(HeroClass.MAGE)


class TestFindClassAbility:
    def test_found(self):
        ability = find_class_ability(HeroClass.OGRE, AbilityKind.STRIKE)
        assert ability is not None
        assert ability.effects.target_damage == 20

    def test_cleric_cannot_strike(self):
        assert find_class_ability(HeroClass.CLERIC, AbilityKind.STRIKE) is None

    def test_ogre_cannot_heal(self):
        assert find_class_ability(HeroClass.OGRE, AbilityKind.HEAL) is None
