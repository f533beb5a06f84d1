from __future__ import annotations

from hero_arena.storage.repos.game_repo import GameRepo

__all__ = [
    "GameRepo",
]
