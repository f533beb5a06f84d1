"""Hero class catalog: pure data lookups, no I/O."""
from __future__ import annotations

from hero_arena.models.hero import Ability, AbilityEffects, AbilityKind, HeroClass

BASE_STATS: dict[HeroClass, tuple[int, int]] = {
    HeroClass.OGRE: (150, 1),
    HeroClass.MAGE: (100, 3),
    HeroClass.CLERIC: (80, 5),
}

_CASTER_TUNING = AbilityEffects(target_damage=25, self_damage=5)

HERO_ABILITIES: dict[HeroClass, tuple[Ability, ...]] = {
    HeroClass.OGRE: (
        Ability(kind=AbilityKind.STRIKE, effects=AbilityEffects(target_damage=20)),
        Ability(kind=AbilityKind.HEAD_BONK, effects=AbilityEffects(target_damage=25, self_damage=5)),
        Ability(kind=AbilityKind.ULTIMATE, effects=AbilityEffects(target_damage=30)),
    ),
    HeroClass.MAGE: (
        Ability(kind=AbilityKind.STRIKE, effects=_CASTER_TUNING),
        Ability(kind=AbilityKind.HEAL, effects=_CASTER_TUNING),
        Ability(kind=AbilityKind.ULTIMATE, effects=_CASTER_TUNING),
    ),
    HeroClass.CLERIC: (
        Ability(kind=AbilityKind.HEAL, effects=_CASTER_TUNING),
        Ability(kind=AbilityKind.ULTIMATE, effects=_CASTER_TUNING),
    ),
}


def get_base_stats(hero_class: HeroClass) -> tuple[int, int]:
    """Starting (health, level) for a hero class."""
    return BASE_STATS[hero_class]


def get_hero_abilities(hero_class: HeroClass) -> list[Ability]:
    """Abilities the class can use, in catalog order."""
    return list(HERO_ABILITIES[hero_class])


def find_class_ability(hero_class: HeroClass, kind: AbilityKind) -> Ability | None:
    """Return the class's tuned ability of the given kind, or None."""
    for ability in HERO_ABILITIES[hero_class]:
        if ability.is_kind(kind):
            return ability
    return None
