"""Tests for the arena's SQLite store: schema migrations and transactions."""
from __future__ import annotations

import sqlite3

import pytest

from hero_arena.storage.database import IN_MEMORY, Database, _MIGRATIONS


def _tables(db):
    with db.get_connection() as conn:
        return {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}


def _schema_versions(db):
    with db.get_connection() as conn:
        return [r[0] for r in conn.execute("SELECT version FROM schema_version ORDER BY version")]


class TestArenaSchema:
    def test_arena_tables_exist(self, in_memory_db):
        assert {"schema_version", "games", "players", "game_activity"} <= _tables(in_memory_db)

    def test_one_version_row_per_migration(self, in_memory_db):
        assert _schema_versions(in_memory_db) == list(range(1, len(_MIGRATIONS) + 1))

    def test_second_initialize_is_noop(self, in_memory_db):
        in_memory_db.initialize()
        assert _schema_versions(in_memory_db) == list(range(1, len(_MIGRATIONS) + 1))

    def test_player_rows_need_a_game(self, in_memory_db):
        with pytest.raises(sqlite3.IntegrityError):
            with in_memory_db.get_connection() as conn:
                conn.execute(
                    "INSERT INTO players (game_id, account_id, record) VALUES (99, 'alice.near', '{}')"
                )

    def test_in_memory_store_starts_empty(self):
        db = Database(IN_MEMORY)
        db.initialize()
        with db.get_connection() as conn:
            assert conn.execute("SELECT count(*) FROM games").fetchone()[0] == 0
        db.close()


class TestStoreFile:
    def test_creates_parent_directory(self, tmp_path):
        db = Database(str(tmp_path / "saves" / "arena.db"))
        db.initialize()
        db.close()
        assert (tmp_path / "saves" / "arena.db").exists()

    def test_reopened_store_keeps_games(self, tmp_path):
        path = str(tmp_path / "saves" / "arena.db")
        db = Database(path)
        db.initialize()
        with db.get_connection() as conn:
            conn.execute("INSERT INTO games (id) VALUES (7)")
        db.close()

        reopened = Database(path)
        reopened.initialize()
        with reopened.get_connection() as conn:
            row = conn.execute("SELECT id FROM games WHERE id = 7").fetchone()
        reopened.close()
        assert row is not None


class TestTransactions:
    def test_game_row_committed(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            conn.execute("INSERT INTO games (id) VALUES (1)")
        with in_memory_db.get_connection() as conn:
            assert conn.execute("SELECT id FROM games WHERE id = 1").fetchone() is not None

    def test_game_row_rolled_back_on_error(self, in_memory_db):
        with pytest.raises(RuntimeError):
            with in_memory_db.get_connection() as conn:
                conn.execute("INSERT INTO games (id) VALUES (2)")
                conn.execute(
                    "INSERT INTO players (game_id, account_id, record) VALUES (2, 'alice.near', '{}')"
                )
                raise RuntimeError("save interrupted")
        with in_memory_db.get_connection() as conn:
            assert conn.execute("SELECT id FROM games WHERE id = 2").fetchone() is None
            assert conn.execute("SELECT count(*) FROM players").fetchone()[0] == 0
