"""Ability name lookup and listing."""
from __future__ import annotations

from hero_arena.errors import ContractError
from hero_arena.models.hero import AbilityKind

# Canonical names, in the order they are offered to players
ABILITY_NAMES: tuple[str, ...] = ("strike", "headbonk", "heal", "ultimate")

_ALIASES: dict[str, AbilityKind] = {
    "strike": AbilityKind.STRIKE,
    "headbonk": AbilityKind.HEAD_BONK,
    "bonk": AbilityKind.HEAD_BONK,
    "heal": AbilityKind.HEAL,
    "ultimate": AbilityKind.ULTIMATE,
    "ult": AbilityKind.ULTIMATE,
}


def resolve(name: str) -> AbilityKind | None:
    """Map a typed ability name (case-sensitive, aliases allowed) to its kind."""
    return _ALIASES.get(name)


def describe_abilities(names: tuple[str, ...] | list[str] = ABILITY_NAMES) -> str:
    """Render names as "a, b, c, or d"."""
    if not names:
        raise ContractError("Ability catalog is empty", code="INVALID_ABILITIES")
    *rest, last = names
    if not rest:
        return last
    return ", ".join(rest) + ", or " + last
