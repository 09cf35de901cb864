"""
Accès aux données du personnel.
"""

import uuid
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from schoolcli.models.staff import Staff
from schoolcli.schemas.staff import StaffResponse

UPDATABLE_FIELDS = ("class_id",)


def create(db: Session, data: Mapping[str, Any]) -> StaffResponse:
    staff = Staff(user_id=data["user_id"], class_id=data.get("class_id"))
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return StaffResponse.model_validate(staff)


def find(db: Session, staff_id: uuid.UUID) -> Optional[StaffResponse]:
    staff = db.get(Staff, staff_id)
    if staff is None:
        return None
    return StaffResponse.model_validate(staff)


def find_all(db: Session, **filters: Any) -> list[StaffResponse]:
    members = db.execute(
        select(Staff).filter_by(**filters).order_by(Staff.created_at, Staff.staff_id)
    ).scalars().all()
    return [StaffResponse.model_validate(m) for m in members]


def find_and_update_by_id(db: Session, staff_id: uuid.UUID, values: Mapping[str, Any]) -> Optional[StaffResponse]:
    staff = db.get(Staff, staff_id)
    if staff is None:
        return None

    for field, value in values.items():
        if field in UPDATABLE_FIELDS:
            setattr(staff, field, value)

    db.commit()
    db.refresh(staff)
    return StaffResponse.model_validate(staff)


def delete(db: Session, staff_id: uuid.UUID) -> bool:
    staff = db.get(Staff, staff_id)
    if staff is None:
        return False
    db.delete(staff)
    db.commit()
    return True
