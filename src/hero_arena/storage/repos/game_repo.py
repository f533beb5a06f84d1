from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from hero_arena.models.game import Game
from hero_arena.models.player import LatestPlayer, dump_player, load_player
from hero_arena.storage.database import Database


def _load_record(raw: str) -> LatestPlayer:
    """Parse a stored record of any version and bring it up to date."""
    return load_player(json.loads(raw))


class GameRepo:
    """Repository for games, their rosters and their activity flags."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def get_game(self, game_id: int) -> Game | None:
        """Fetch a game with its roster in account order, or None if it was never created."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM games WHERE id = ?", (game_id,)
            ).fetchone()
            if row is None:
                return None
            players = conn.execute(
                "SELECT account_id, record FROM players WHERE game_id = ? "
                "ORDER BY account_id",
                (game_id,),
            ).fetchall()
        return Game(
            id=row["id"],
            players={p["account_id"]: _load_record(p["record"]) for p in players},
            winner=_load_record(row["winner"]) if row["winner"] else None,
        )

    def save_game(self, game: Game) -> None:
        """Write the whole game in one transaction.

        Players missing from ``game.players`` are deleted; everyone else is
        upserted with their latest-version record.
        """
        winner = dump_player(game.winner) if game.winner is not None else None
        accounts = list(game.players)
        with self.db.get_connection() as conn:
            conn.execute(
                """INSERT INTO games (id, winner) VALUES (?, ?)
                ON CONFLICT(id) DO UPDATE SET winner = ?""",
                (game.id, winner, winner),
            )
            placeholders = ", ".join("?" for _ in accounts)
            if accounts:
                conn.execute(
                    f"DELETE FROM players WHERE game_id = ? AND account_id NOT IN ({placeholders})",
                    [game.id, *accounts],
                )
            else:
                conn.execute("DELETE FROM players WHERE game_id = ?", (game.id,))
            for account_id, player in game.players.items():
                record = dump_player(player)
                conn.execute(
                    """INSERT INTO players (game_id, account_id, record) VALUES (?, ?, ?)
                    ON CONFLICT(game_id, account_id) DO UPDATE SET record = ?""",
                    (game.id, account_id, record, record),
                )

    def list_players(self, game_id: int) -> list[tuple[str, LatestPlayer]] | None:
        """Return the roster as (account_id, record) pairs, or None for an unknown game."""
        game = self.get_game(game_id)
        if game is None:
            return None
        return game.roster()

    # -- Activity --

    def set_active(self, game_id: int, active: bool) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self.db.get_connection() as conn:
            conn.execute(
                """INSERT INTO game_activity (game_id, is_active, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(game_id) DO UPDATE SET is_active = ?, updated_at = ?""",
                (game_id, active, now, active, now),
            )

    def is_active(self, game_id: int) -> bool:
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT is_active FROM game_activity WHERE game_id = ?", (game_id,)
            ).fetchone()
        return bool(row["is_active"]) if row else False

    def get_raw_record(self, game_id: int, account_id: str) -> dict[str, Any] | None:
        """Return a player's stored JSON exactly as written, without upgrading it."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT record FROM players WHERE game_id = ? AND account_id = ?",
                (game_id, account_id),
            ).fetchone()
        return json.loads(row["record"]) if row else None
