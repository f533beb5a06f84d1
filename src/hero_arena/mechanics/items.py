"""Item catalog: which effect modifiers each equippable item grants."""
from __future__ import annotations

from hero_arena.models.hero import AbilityEffects, Item

ITEM_EFFECTS: dict[Item, tuple[AbilityEffects, ...]] = {
    Item.SHIELD: (AbilityEffects(self_damage_reduction=15),),
    Item.SWORD: (AbilityEffects(target_damage=15),),
    Item.HEALING_POTION: (AbilityEffects(self_heal=50),),
}


def get_item_abilities(item: Item) -> list[AbilityEffects]:
    return list(ITEM_EFFECTS[item])
