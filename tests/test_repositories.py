"""
Tests des repositories : contrat uniforme create / find / find_all / update / delete.
"""

import uuid
from datetime import datetime

import pytest

from schoolcli.models import Staff, Student, User
from schoolcli.repositories import class_repository, staff_repository, student_repository, user_repository
from schoolcli.schemas.user import UserResponse


@pytest.fixture
def user(db):
    return user_repository.create(db, {"first_name": "Ann", "last_name": "Lee", "age": 12})


@pytest.fixture
def math(db):
    return class_repository.create(db, {"name": "Math"})


def test_user_create_retourne_un_snapshot(db, user):
    assert isinstance(user, UserResponse)
    assert user.age == 12


def test_find_inexistant_retourne_none(db):
    assert user_repository.find(db, uuid.uuid4()) is None
    assert class_repository.find(db, uuid.uuid4()) is None
    assert student_repository.find(db, uuid.uuid4()) is None
    assert staff_repository.find(db, uuid.uuid4()) is None


def test_delete_inexistant_retourne_false(db):
    assert user_repository.delete(db, uuid.uuid4()) is False
    assert class_repository.delete(db, uuid.uuid4()) is False
    assert student_repository.delete(db, uuid.uuid4()) is False
    assert staff_repository.delete(db, uuid.uuid4()) is False


def test_update_ignore_les_champs_non_modifiables(db, user):
    other_id = uuid.uuid4()
    updated = user_repository.find_and_update_by_id(db, user.id, {"id": other_id, "first_name": "Anne"})
    assert updated.id == user.id
    assert updated.first_name == "Anne"


def test_update_inexistant_ne_modifie_rien(db, user):
    assert user_repository.find_and_update_by_id(db, uuid.uuid4(), {"first_name": "Bob"}) is None
    assert [u.first_name for u in user_repository.find_all(db)] == ["Ann"]


def test_update_rafraichit_updated_at(db, math):
    updated = class_repository.find_and_update_by_id(db, math.id, {"name": "Algèbre"})
    assert updated.updated_at >= math.updated_at
    assert updated.created_at == math.created_at


def test_student_find_all_filtre(db, user, math):
    student = student_repository.create(db, {"user_id": user.id, "class_id": math.id})
    assert student_repository.find_all(db, user_id=user.id) == [student]
    assert student_repository.find_all(db, user_id=uuid.uuid4()) == []


def test_staff_update_class(db, user, math):
    staff = staff_repository.create(db, {"user_id": user.id})
    updated = staff_repository.find_and_update_by_id(db, staff.staff_id, {"class_id": math.id, "user_id": uuid.uuid4()})
    assert updated.class_id == math.id
    assert updated.user_id == user.id


@pytest.mark.parametrize("model, key, repository", [
    (Student, "student_id", student_repository),
    (Staff, "staff_id", staff_repository),
])
def test_find_all_meme_horodatage_trie_par_identifiant(db, math, model, key, repository):
    """À created_at égal, l'ordre suit la clé primaire et non l'ordre d'insertion."""
    created_at = datetime(2024, 9, 1, 8, 0, 0)
    ids = [uuid.UUID(int=n) for n in (3, 1, 2)]
    for n, row_id in enumerate(ids):
        user = User(first_name=f"Prénom{n}", last_name="Lee")
        db.add(user)
        db.flush()
        db.add(model(**{key: row_id}, user_id=user.id, class_id=math.id, created_at=created_at))
    db.commit()

    listed = [getattr(row, key) for row in repository.find_all(db)]
    assert listed == sorted(ids)
