"""Shared fixtures for the hero arena test suite."""
from __future__ import annotations

import pytest

from hero_arena.models.game import Game
from hero_arena.models.hero import HeroClass
from hero_arena.models.player import PlayerV1


@pytest.fixture
def ogre() -> PlayerV1:
    return PlayerV1(name="Grok", hero_class=HeroClass.OGRE, health=150, level=1)


@pytest.fixture
def cleric() -> PlayerV1:
    return PlayerV1(name="Sister Ana", hero_class=HeroClass.CLERIC, health=80, level=5)


@pytest.fixture
def mage() -> PlayerV1:
    return PlayerV1(name="Merlin", hero_class=HeroClass.MAGE, health=100, level=3)


@pytest.fixture
def duel(ogre, cleric) -> Game:
    return Game(id=1, players={"alice.near": ogre, "bob.near": cleric})


@pytest.fixture
def in_memory_db(tmp_path):
    from hero_arena.storage.database import Database

    db = Database(str(tmp_path / "test.db"))
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def arena(tmp_path):
    from hero_arena.arena import Arena

    a = Arena(config={}, db_path=str(tmp_path / "arena.db"))
    yield a
    a.close()
