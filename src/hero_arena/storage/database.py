"""SQLite game store: one shared connection plus numbered schema migrations."""
from __future__ import annotations

import contextlib
import importlib
import pathlib
import sqlite3
from typing import Generator

IN_MEMORY = ":memory:"

# Applied in order; position (1-based) is the schema_version row written for each.
_MIGRATIONS = [
    "001_initial",
    "002_game_activity",
]


class Database:
    """SQLite store holding every game's roster and activity flag.

    Rosters live in ``games``/``players`` (one JSON player record per row),
    activity flags in ``game_activity``.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None
        if db_path != IN_MEMORY:
            pathlib.Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    def initialize(self) -> None:
        """Bring the arena schema up to date; a store opened twice is migrated once."""
        conn = self._get_raw_connection()
        conn.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER PRIMARY KEY)")
        applied = self._applied_versions(conn)
        for version, name in enumerate(_MIGRATIONS, 1):
            if version in applied:
                continue
            importlib.import_module(f"hero_arena.storage.migrations.{name}").upgrade(conn)
            conn.execute("INSERT INTO schema_version VALUES (?)", (version,))
        conn.commit()

    @staticmethod
    def _applied_versions(conn: sqlite3.Connection) -> set[int]:
        return {row[0] for row in conn.execute("SELECT version FROM schema_version")}

    def _get_raw_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = sqlite3.connect(self.db_path)
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA journal_mode=WAL")
            # players.game_id references games.id
            self._connection.execute("PRAGMA foreign_keys=ON")
        return self._connection

    @contextlib.contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Yield the store's connection as one transaction.

        A game save either lands whole or, if anything raises, not at all.
        """
        conn = self._get_raw_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
