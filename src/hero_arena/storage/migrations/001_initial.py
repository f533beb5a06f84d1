from __future__ import annotations

import sqlite3

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS games (
    id          INTEGER PRIMARY KEY,
    winner      TEXT
);

CREATE TABLE IF NOT EXISTS players (
    game_id     INTEGER NOT NULL REFERENCES games(id),
    account_id  TEXT NOT NULL,
    record      TEXT NOT NULL,
    PRIMARY KEY (game_id, account_id)
);
"""


def upgrade(conn: sqlite3.Connection) -> None:
    conn.executescript(_SCHEMA_SQL)
