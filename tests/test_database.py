"""
Tests du cycle de vie de la base et de la configuration des associations.
"""

from unittest.mock import patch

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import OperationalError

from schoolcli.database import Database, create_database
from schoolcli.errors import DatabaseError
from schoolcli.models import SchoolClass, Staff, Student, User
from schoolcli.models.associations import setup_associations


def test_init_cree_les_quatre_tables(database):
    tables = set(inspect(database.engine).get_table_names())
    assert {"users", "classes", "students", "staff"} <= tables


def test_colonnes_horodatage(database):
    columns = {c["name"] for c in inspect(database.engine).get_columns("students")}
    assert {"student_id", "user_id", "class_id", "created_at", "updated_at"} <= columns


def test_init_idempotent(database):
    database.init()
    database.init()
    assert database.initialized


def test_sqlite_cles_etrangeres_actives(db):
    assert db.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_init_echec_leve_database_error():
    database = Database("sqlite://")
    with patch("schoolcli.database.Base.metadata.create_all") as create_all:
        create_all.side_effect = OperationalError("CREATE TABLE", None, Exception("disk I/O error"))
        with pytest.raises(DatabaseError, match="Synchronisation"):
            database.init()
    assert not database.initialized


def test_session_initialise_si_necessaire():
    database = Database("sqlite://")
    with database.session() as db:
        assert db.execute(text("SELECT count(*) FROM users")).scalar() == 0
    assert database.initialized
    database.dispose()


def test_create_database_utilise_l_url_fournie():
    database = create_database("sqlite://", echo=False)
    assert database.engine.url.get_backend_name() == "sqlite"
    database.dispose()


# --- Associations ---

def test_setup_associations_idempotent():
    setup_associations()
    setup_associations()
    assert len([r for r in inspect(User).relationships if r.key == "student"]) == 1


@pytest.mark.parametrize("model, key, uselist", [
    (User, "student", False),
    (User, "staff", False),
    (SchoolClass, "students", True),
    (SchoolClass, "staff", True),
])
def test_relations_parent_en_cascade(model, key, uselist):
    setup_associations()
    relationship = inspect(model).relationships[key]
    assert relationship.uselist is uselist
    assert relationship.cascade.delete
    assert not relationship.cascade.delete_orphan


@pytest.mark.parametrize("model", [Student, Staff])
def test_relations_enfant(model):
    setup_associations()
    relationships = inspect(model).relationships
    assert relationships["user"].mapper.class_ is User
    assert relationships["school_class"].mapper.class_ is SchoolClass
