"""
Tests du service des élèves : références, mises à jour et suppressions en cascade.
"""

import uuid
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from schoolcli.errors import DatabaseError, ValidationError
from schoolcli.services.class_service import create_class, delete_class
from schoolcli.services.student_service import (
    create_student,
    delete_student,
    get_student,
    list_students,
    update_student,
)
from schoolcli.services.user_service import create_user, delete_user


@pytest.fixture
def user(db):
    return create_user(db, {"first_name": "Ann", "last_name": "Lee"})


@pytest.fixture
def math(db):
    return create_class(db, {"name": "Math"})


# --- Validation ---

def test_create_student_uuid_invalide_repository_non_appele():
    with patch("schoolcli.services.student_service.student_repository") as repo:
        with pytest.raises(ValidationError):
            create_student(MagicMock(), {"user_id": "x", "class_id": "y"})
        repo.create.assert_not_called()


def test_create_student_utilisateur_et_classe_introuvables(db):
    with pytest.raises(ValidationError) as exc:
        create_student(db, {"user_id": uuid.uuid4(), "class_id": uuid.uuid4()})
    assert sorted(v.field for v in exc.value.violations) == ["class_id", "user_id"]
    assert list_students(db) == []


def test_create_student_utilisateur_deja_eleve(db, user, math):
    create_student(db, {"user_id": user.id, "class_id": math.id})
    with pytest.raises(ValidationError, match="déjà élève"):
        create_student(db, {"user_id": user.id, "class_id": math.id})


# --- CRUD ---

def test_create_student_puis_get(db, user, math):
    student = create_student(db, {"user_id": str(user.id), "class_id": str(math.id)})
    assert student.user_id == user.id
    assert student.class_id == math.id

    found = get_student(db, student.student_id)
    assert found.student_id == student.student_id


def test_list_students_par_classe(db, user, math):
    other = create_class(db, {"name": "Histoire"})
    bob = create_user(db, {"first_name": "Bob", "last_name": "Ray"})
    create_student(db, {"user_id": user.id, "class_id": math.id})
    create_student(db, {"user_id": bob.id, "class_id": other.id})

    assert [s.user_id for s in list_students(db, class_id=other.id)] == [bob.id]


def test_update_student_change_de_classe(db, user, math):
    other = create_class(db, {"name": "Histoire"})
    student = create_student(db, {"user_id": user.id, "class_id": math.id})
    updated = update_student(db, student.student_id, {"class_id": other.id})
    assert updated.class_id == other.id


def test_update_student_classe_introuvable(db, user, math):
    student = create_student(db, {"user_id": user.id, "class_id": math.id})
    with pytest.raises(ValidationError, match="Classe introuvable"):
        update_student(db, student.student_id, {"class_id": uuid.uuid4()})
    assert get_student(db, student.student_id).class_id == math.id


def test_update_student_inexistant(db, math):
    assert update_student(db, uuid.uuid4(), {"class_id": math.id}) is None


def test_delete_student(db, user, math):
    student = create_student(db, {"user_id": user.id, "class_id": math.id})
    assert delete_student(db, student.student_id) is True
    assert get_student(db, student.student_id) is None


def test_delete_student_inexistant(db):
    assert delete_student(db, uuid.uuid4()) is False


def test_delete_student_erreur_base_convertie():
    db = MagicMock()
    with patch("schoolcli.services.student_service.student_repository") as repo:
        repo.delete.side_effect = OperationalError("delete", None, Exception("locked"))
        with pytest.raises(DatabaseError):
            delete_student(db, uuid.uuid4())
    db.rollback.assert_called_once()


# --- Cascades ---

def test_suppression_utilisateur_supprime_eleve(db, user, math):
    student = create_student(db, {"user_id": user.id, "class_id": math.id})
    delete_user(db, user.id)
    assert get_student(db, student.student_id) is None


def test_scenario_suppression_classe_supprime_eleve(db):
    """Classe Math → utilisateur Ann Lee → élève → suppression de la classe → élève introuvable."""
    math = create_class(db, {"name": "Math"})
    assert math.name == "Math"

    ann = create_user(db, {"first_name": "Ann", "last_name": "Lee"})
    assert (ann.first_name, ann.last_name) == ("Ann", "Lee")

    student = create_student(db, {"user_id": ann.id, "class_id": math.id})
    assert (student.user_id, student.class_id) == (ann.id, math.id)

    assert delete_class(db, math.id) is True
    assert get_student(db, student.student_id) is None
