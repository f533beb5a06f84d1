"""Application service: the public operations of the arena, wired to storage."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from hero_arena.errors import GameNotFound, InvalidGameId, NameTooLong
from hero_arena.log_events import log_events_version
from hero_arena.mechanics import combat
from hero_arena.mechanics.abilities import describe_abilities
from hero_arena.mechanics.heroes import get_base_stats
from hero_arena.models.game import MAX_GAME_ID, Game
from hero_arena.models.hero import HeroClass
from hero_arena.models.player import MAX_NAME_LENGTH, LatestPlayer

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "saves/arena.db"


def _load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.toml from the project root, or from ``path`` when given."""
    import tomllib

    config_path = path or Path(__file__).parent.parent.parent / "config.toml"
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    return {}


def _check_game_id(game_id: int) -> None:
    if not 0 <= game_id <= MAX_GAME_ID:
        raise InvalidGameId(
            f"Game id {game_id} is out of range.",
            advice=f"Game ids run from 0 to {MAX_GAME_ID}.",
        )


class Arena:
    """Resolves registrations and ability uses against the game store.

    Every public method is one atomic operation: it reads what it needs,
    computes in memory, and writes at most once.
    """

    def __init__(self, config: dict[str, Any] | None = None, db_path: str | None = None):
        self.config = config if config is not None else _load_config()
        self.db_path = db_path or self.config.get("storage", {}).get("db_path", DEFAULT_DB_PATH)
        self._db = None
        self._games = None

    @property
    def db(self):
        if self._db is None:
            from hero_arena.storage.database import Database

            self._db = Database(self.db_path)
            self._db.initialize()
        return self._db

    @property
    def games(self):
        if self._games is None:
            from hero_arena.storage.repos import GameRepo

            self._games = GameRepo(self.db)
        return self._games

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
            self._db = None
            self._games = None

    # -- Operations --

    def register(self, account_id: str, hero_class: HeroClass, name: str, game_id: int) -> LatestPlayer:
        """Create (or overwrite) the caller's hero in a game, creating the game if needed."""
        _check_game_id(game_id)
        if len(name) > MAX_NAME_LENGTH:
            raise NameTooLong(
                f"Name must be at most {MAX_NAME_LENGTH} characters, got {len(name)}.",
                advice=f"Choose a name of {MAX_NAME_LENGTH} characters or fewer.",
            )
        health, level = get_base_stats(hero_class)
        player = LatestPlayer(name=name, hero_class=hero_class, health=health, level=level, items=[])
        game = self.games.get_game(game_id) or Game(id=game_id)
        game.players[account_id] = player
        self.games.save_game(game)
        logger.info("%s registered %s the %s in game %s", account_id, name, hero_class.value, game_id)
        return player

    def use_ability(self, account_id: str, ability: str, target: str, game_id: int) -> combat.CombatOutcome:
        _check_game_id(game_id)
        kind = combat.check_request(account_id, ability, target)
        game = self._require_game(game_id)
        outcome = combat.apply_ability(game, account_id, kind, target)
        self.games.save_game(game)
        return outcome

    def list_game_players(self, game_id: int) -> list[tuple[str, LatestPlayer]]:
        _check_game_id(game_id)
        roster = self.games.list_players(game_id)
        if roster is None:
            raise GameNotFound(f"Couldn't find game {game_id}.")
        return roster

    def start(self, game_id: int) -> None:
        _check_game_id(game_id)
        logger.info("Starting game %s", game_id)
        self.games.set_active(game_id, True)

    def stop(self, game_id: int) -> None:
        _check_game_id(game_id)
        logger.info("Stopping game %s", game_id)
        self.games.set_active(game_id, False)

    def is_active(self, game_id: int) -> bool:
        _check_game_id(game_id)
        return self.games.is_active(game_id)

    def list_abilities(self) -> str:
        return describe_abilities()

    def log_events_version(self) -> str:
        return log_events_version()

    def _require_game(self, game_id: int) -> Game:
        game = self.games.get_game(game_id)
        if game is None:
            raise GameNotFound(f"Game {game_id} doesn't exist.")
        return game
