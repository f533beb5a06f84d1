"""Per-game activity flag. Games can be started before anyone registers."""
from __future__ import annotations

import sqlite3


def upgrade(conn: sqlite3.Connection) -> None:
    conn.execute(
        """CREATE TABLE IF NOT EXISTS game_activity (
            game_id     INTEGER PRIMARY KEY,
            is_active   BOOLEAN NOT NULL DEFAULT 0,
            updated_at  TEXT
        )"""
    )
