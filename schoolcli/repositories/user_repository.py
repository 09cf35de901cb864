"""
Accès aux données des utilisateurs.
Les lectures retournent des UserResponse détachés de la session ; l'absence
d'enregistrement se traduit par None / False, jamais par une exception.
"""

import uuid
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from schoolcli.models.user import User
from schoolcli.schemas.user import UserResponse

UPDATABLE_FIELDS = ("first_name", "last_name", "age")


def create(db: Session, data: Mapping[str, Any]) -> UserResponse:
    user = User(
        first_name=data["first_name"],
        last_name=data["last_name"],
        age=data.get("age"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)


def find(db: Session, user_id: uuid.UUID) -> Optional[UserResponse]:
    user = db.get(User, user_id)
    if user is None:
        return None
    return UserResponse.model_validate(user)


def find_all(db: Session, **filters: Any) -> list[UserResponse]:
    """Retourne les utilisateurs triés par nom puis prénom (filtres d'égalité optionnels)."""
    users = db.execute(
        select(User).filter_by(**filters).order_by(User.last_name, User.first_name)
    ).scalars().all()
    return [UserResponse.model_validate(u) for u in users]


def find_and_update_by_id(db: Session, user_id: uuid.UUID, values: Mapping[str, Any]) -> Optional[UserResponse]:
    """Met à jour les champs fournis. Retourne None (sans écriture) si l'utilisateur n'existe pas."""
    user = db.get(User, user_id)
    if user is None:
        return None

    for field, value in values.items():
        if field in UPDATABLE_FIELDS:
            setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)


def delete(db: Session, user_id: uuid.UUID) -> bool:
    """Supprime un utilisateur ; son profil élève et son profil personnel suivent en cascade."""
    user = db.get(User, user_id)
    if user is None:
        return False
    db.delete(user)
    db.commit()
    return True
