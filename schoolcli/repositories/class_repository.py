"""
Accès aux données des classes.
"""

import uuid
from typing import Any, Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from schoolcli.models.school_class import SchoolClass
from schoolcli.models.staff import Staff
from schoolcli.models.student import Student
from schoolcli.schemas.school_class import ClassResponse

UPDATABLE_FIELDS = ("name",)


def create(db: Session, data: Mapping[str, Any]) -> ClassResponse:
    school_class = SchoolClass(name=data["name"])
    db.add(school_class)
    db.commit()
    db.refresh(school_class)
    return _to_response(db, school_class)


def find(db: Session, class_id: uuid.UUID) -> Optional[ClassResponse]:
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return None
    return _to_response(db, school_class)


def find_all(db: Session, **filters: Any) -> list[ClassResponse]:
    """Retourne toutes les classes, triées par nom."""
    classes = db.execute(
        select(SchoolClass).filter_by(**filters).order_by(SchoolClass.name)
    ).scalars().all()
    return [_to_response(db, c) for c in classes]


def find_and_update_by_id(db: Session, class_id: uuid.UUID, values: Mapping[str, Any]) -> Optional[ClassResponse]:
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return None

    for field, value in values.items():
        if field in UPDATABLE_FIELDS:
            setattr(school_class, field, value)

    db.commit()
    db.refresh(school_class)
    return _to_response(db, school_class)


def delete(db: Session, class_id: uuid.UUID) -> bool:
    """
    Supprime une classe définitivement.
    Les élèves et membres du personnel rattachés sont supprimés en cascade.
    """
    school_class = db.get(SchoolClass, class_id)
    if school_class is None:
        return False
    db.delete(school_class)
    db.commit()
    return True


def _to_response(db: Session, school_class: SchoolClass) -> ClassResponse:
    """Construit le schéma de réponse avec les compteurs élèves et personnel."""
    nb_students = db.execute(
        select(func.count())
        .select_from(Student)
        .where(Student.class_id == school_class.id)
    ).scalar() or 0

    nb_staff = db.execute(
        select(func.count())
        .select_from(Staff)
        .where(Staff.class_id == school_class.id)
    ).scalar() or 0

    return ClassResponse(
        id=school_class.id,
        name=school_class.name,
        nb_students=nb_students,
        nb_staff=nb_staff,
        created_at=school_class.created_at,
        updated_at=school_class.updated_at,
    )
