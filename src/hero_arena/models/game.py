from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hero_arena.models.player import LatestPlayer

MAX_GAME_ID = 2**32 - 1


class Game(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(ge=0, le=MAX_GAME_ID)
    # account id -> record, kept in account order
    players: dict[str, LatestPlayer] = Field(default_factory=dict)
    # None while the game is ongoing
    winner: Optional[LatestPlayer] = None

    def roster(self) -> list[tuple[str, LatestPlayer]]:
        return sorted(self.players.items(), key=lambda kv: kv[0])
