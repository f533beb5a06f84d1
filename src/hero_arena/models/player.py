"""Versioned player records.

Stored records carry a ``version`` tag. Each tag maps to a model class in
``_RECORD_VERSIONS``; older versions also register an upgrader in
``_UPGRADERS`` that converts them to the next version. ``to_latest`` walks
that chain, so the rest of the code only ever sees ``LatestPlayer``.

To add a version: define the new model with a new tag, append it to
``_RECORD_VERSIONS``, register an upgrader from the previous latest model,
and repoint ``LatestPlayer``. Never change or remove an existing tag.
"""
from __future__ import annotations

from typing import Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hero_arena.errors import ContractError
from hero_arena.models.hero import HeroClass, Item

MAX_NAME_LENGTH = 16
U8_MAX = 255


class PlayerV1(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    version: Literal["base_version"] = "base_version"
    name: str
    hero_class: HeroClass
    health: int = Field(ge=0, le=U8_MAX)
    level: int = Field(ge=0, le=U8_MAX)
    items: list[Item] = Field(default_factory=list)


# Union of every stored shape; grows as versions are added.
PlayerRecord = Union[PlayerV1]
LatestPlayer = PlayerV1

_RECORD_VERSIONS: dict[str, type[BaseModel]] = {
    "base_version": PlayerV1,
}

_UPGRADERS: dict[type[BaseModel], Callable[[Any], BaseModel]] = {}


def parse_player_record(data: dict[str, Any]) -> PlayerRecord:
    """Validate a stored record against the model its version tag names."""
    tag = data.get("version")
    model = _RECORD_VERSIONS.get(tag)
    if model is None:
        raise ContractError(
            f"Unknown player record version: {tag!r}", code="UNKNOWN_RECORD_VERSION",
        )
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ContractError(
            f"Stored player record does not match {tag!r}: {exc}", code="INVALID_RECORD",
        ) from exc


def to_latest(record: PlayerRecord) -> LatestPlayer:
    """Upgrade a record of any known version to ``LatestPlayer``."""
    current: BaseModel = record
    while not isinstance(current, LatestPlayer):
        upgrade = _UPGRADERS.get(type(current))
        if upgrade is None:
            raise ContractError(
                f"No upgrade path from {type(current).__name__}", code="UNKNOWN_RECORD_VERSION",
            )
        current = upgrade(current)
    return current


def load_player(data: dict[str, Any]) -> LatestPlayer:
    return to_latest(parse_player_record(data))


def dump_player(player: LatestPlayer) -> str:
    return player.model_dump_json()
