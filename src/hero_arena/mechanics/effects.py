"""Effect resolution: combine an ability with equipped items, pure, no I/O."""
from __future__ import annotations

from hero_arena.errors import InvalidTarget
from hero_arena.mechanics.items import get_item_abilities
from hero_arena.models.hero import AbilityEffects, Item
from hero_arena.models.player import LatestPlayer


def accumulate_items(start: AbilityEffects, items: list[Item]) -> AbilityEffects:
    """Add each item's modifiers to ``start``, field by field.

    Only the damage and heal fields are carried; damage reduction from items
    does not stack onto the bundle.
    """
    target_damage = start.target_damage
    self_damage = start.self_damage
    target_heal = start.target_heal
    self_heal = start.self_heal
    for item in items:
        for mod in get_item_abilities(item):
            target_damage += mod.target_damage
            self_damage += mod.self_damage
            target_heal += mod.target_heal
            self_heal += mod.self_heal
    return start.model_copy(update={
        "target_damage": target_damage,
        "self_damage": self_damage,
        "target_heal": target_heal,
        "self_heal": self_heal,
    })


def sum_effects(
    base: AbilityEffects,
    actor_id: str,
    actor: LatestPlayer,
    target_id: str,
    target: LatestPlayer,
) -> tuple[AbilityEffects, AbilityEffects]:
    """Return (actor effects, target effects) for one ability use.

    The actor starts from the ability's own bundle; the target starts from
    zero. Each side then picks up the modifiers of its own equipped items.
    """
    if actor_id == target_id:
        raise InvalidTarget(
            "Cannot use abilities on yourself.",
            advice="Pick another registered player as the target.",
        )
    actor_effects = accumulate_items(AbilityEffects() + base, actor.items)
    target_effects = accumulate_items(AbilityEffects(), target.items)
    return actor_effects, target_effects
