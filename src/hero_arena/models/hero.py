from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HeroClass(str, Enum):
    OGRE = "ogre"
    MAGE = "mage"
    CLERIC = "cleric"


class AbilityKind(str, Enum):
    STRIKE = "strike"
    HEAD_BONK = "headbonk"
    HEAL = "heal"
    ULTIMATE = "ultimate"


class Item(str, Enum):
    SHIELD = "shield"
    SWORD = "sword"
    HEALING_POTION = "healing_potion"


class AbilityEffects(BaseModel):
    """Numeric deltas an ability or item contributes. Missing fields count as zero."""

    model_config = ConfigDict(frozen=True)

    target_damage: int = Field(default=0, ge=0)
    self_damage: int = Field(default=0, ge=0)
    target_heal: int = Field(default=0, ge=0)
    self_heal: int = Field(default=0, ge=0)
    self_damage_reduction: int = Field(default=0, ge=0)

    def __add__(self, other: AbilityEffects) -> AbilityEffects:
        if not isinstance(other, AbilityEffects):
            return NotImplemented
        return AbilityEffects(
            target_damage=self.target_damage + other.target_damage,
            self_damage=self.self_damage + other.self_damage,
            target_heal=self.target_heal + other.target_heal,
            self_heal=self.self_heal + other.self_heal,
            self_damage_reduction=self.self_damage_reduction + other.self_damage_reduction,
        )


class Ability(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AbilityKind
    effects: AbilityEffects = Field(default_factory=AbilityEffects)

    def is_kind(self, kind: AbilityKind) -> bool:
        """Match on the kind tag only; two tunings of the same kind are the same ability."""
        return self.kind == kind
