"""Combat resolution: applies one ability use to a game's roster.

Everything here works on an in-memory ``Game``; nothing is persisted. All
checks run before the first mutation, so a raised error leaves the game
untouched and the caller simply does not save it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hero_arena.errors import (
    AbilityNotAvailable,
    InvalidTarget,
    NotRegistered,
    TargetNotRegistered,
    UnknownAbility,
)
from hero_arena.mechanics.abilities import describe_abilities, resolve
from hero_arena.mechanics.effects import sum_effects
from hero_arena.mechanics.heroes import find_class_ability
from hero_arena.models.game import Game
from hero_arena.models.hero import AbilityEffects, AbilityKind
from hero_arena.models.player import U8_MAX, LatestPlayer

logger = logging.getLogger(__name__)

CRITICAL_STRIKE = 5
CRITICAL_LEVEL_STEP = 6


@dataclass
class CombatOutcome:
    ability: AbilityKind
    actor_id: str
    target_id: str
    actor_effects: AbilityEffects
    target_effects: AbilityEffects
    damage_to_target: int = 0
    critical_bonus: int = 0
    actor_health: int = 0
    actor_level: int = 0
    target_health: int = 0
    deaths: list[str] = field(default_factory=list)


def reduce_health(health: int, amount: int) -> int:
    """Subtract damage, never going below zero."""
    return max(0, health - amount)


def critical_bonus(level: int) -> int:
    """Bonus damage when ``level`` is a positive multiple of 6, else 0."""
    if level > 0 and level % CRITICAL_LEVEL_STEP == 0:
        return CRITICAL_STRIKE * (level // CRITICAL_LEVEL_STEP)
    return 0


def survives(player: LatestPlayer, effects: AbilityEffects) -> bool:
    """Apply the player's own self heal once if they are down. Returns False on death."""
    if player.health <= 0:
        player.health = min(U8_MAX, player.health + effects.self_heal)
    return player.health > 0


def check_request(actor_id: str, ability_name: str, target_id: str) -> AbilityKind:
    """Checks that need no game state: the target and the ability name."""
    if actor_id == target_id:
        raise InvalidTarget(
            "Cannot use abilities on yourself.",
            advice="Pick another registered player as the target.",
        )
    kind = resolve(ability_name)
    if kind is None:
        raise UnknownAbility(
            f"Unknown ability: {ability_name!r}",
            advice=f"Please use one of these abilities: {describe_abilities()}.",
        )
    return kind


def use_ability(game: Game, actor_id: str, ability_name: str, target_id: str) -> CombatOutcome:
    """Resolve one ability use and apply it to ``game.players`` in place."""
    kind = check_request(actor_id, ability_name, target_id)
    return apply_ability(game, actor_id, kind, target_id)


def apply_ability(game: Game, actor_id: str, kind: AbilityKind, target_id: str) -> CombatOutcome:
    """Apply an already checked request (see ``check_request``) to ``game.players``."""
    actor = game.players.get(actor_id)
    if actor is None:
        raise NotRegistered(
            f"{actor_id} is not registered in game {game.id}.",
            advice="Add yourself first by calling register.",
        )
    target = game.players.get(target_id)
    if target is None:
        raise TargetNotRegistered(f"Target {target_id} is not registered in game {game.id}.")

    ability = find_class_ability(actor.hero_class, kind)
    if ability is None:
        raise AbilityNotAvailable(f"A {actor.hero_class.value} cannot use {kind.value}.")

    actor_fx, target_fx = sum_effects(ability.effects, actor_id, actor, target_id, target)
    logger.debug("%s uses %s: actor=%s target=%s", actor_id, kind.value, actor_fx, target_fx)

    actor.health = reduce_health(actor.health, actor_fx.self_damage)
    # Any ability use levels the actor up, offensive or not
    actor.level = min(U8_MAX, actor.level + 1)

    bonus = critical_bonus(actor.level)
    damage = actor_fx.target_damage + bonus
    target.health = reduce_health(target.health, damage)

    outcome = CombatOutcome(
        ability=kind,
        actor_id=actor_id,
        target_id=target_id,
        actor_effects=actor_fx,
        target_effects=target_fx,
        damage_to_target=damage,
        critical_bonus=bonus,
    )

    for account_id, player, effects in ((actor_id, actor, actor_fx), (target_id, target, target_fx)):
        if not survives(player, effects):
            del game.players[account_id]
            outcome.deaths.append(account_id)
            logger.info("Player %s (%s) died in game %s", player.name, account_id, game.id)

    outcome.actor_health = actor.health
    outcome.actor_level = actor.level
    outcome.target_health = target.health
    return outcome
