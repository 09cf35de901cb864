"""
Accès aux données des élèves.
"""

import uuid
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from schoolcli.models.student import Student
from schoolcli.schemas.student import StudentResponse

UPDATABLE_FIELDS = ("class_id",)


def create(db: Session, data: Mapping[str, Any]) -> StudentResponse:
    student = Student(user_id=data["user_id"], class_id=data["class_id"])
    db.add(student)
    db.commit()
    db.refresh(student)
    return StudentResponse.model_validate(student)


def find(db: Session, student_id: uuid.UUID) -> Optional[StudentResponse]:
    student = db.get(Student, student_id)
    if student is None:
        return None
    return StudentResponse.model_validate(student)


def find_all(db: Session, **filters: Any) -> list[StudentResponse]:
    students = db.execute(
        select(Student).filter_by(**filters).order_by(Student.created_at, Student.student_id)
    ).scalars().all()
    return [StudentResponse.model_validate(s) for s in students]


def find_and_update_by_id(db: Session, student_id: uuid.UUID, values: Mapping[str, Any]) -> Optional[StudentResponse]:
    """Change la classe d'un élève. Retourne None si l'élève n'existe pas."""
    student = db.get(Student, student_id)
    if student is None:
        return None

    for field, value in values.items():
        if field in UPDATABLE_FIELDS:
            setattr(student, field, value)

    db.commit()
    db.refresh(student)
    return StudentResponse.model_validate(student)


def delete(db: Session, student_id: uuid.UUID) -> bool:
    student = db.get(Student, student_id)
    if student is None:
        return False
    db.delete(student)
    db.commit()
    return True
