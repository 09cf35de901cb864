"""
Configuration partagée pour tous les tests.
Chaque test reçoit une base SQLite en mémoire, neuve et initialisée.
"""

import pytest
from click.testing import CliRunner

from schoolcli.database import Database


@pytest.fixture
def database():
    """Base SQLite en mémoire (associations + schéma créés)."""
    database = Database("sqlite://")
    database.init()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    """Session ouverte sur la base de test."""
    with database.session() as session:
        yield session


@pytest.fixture
def runner():
    return CliRunner()
