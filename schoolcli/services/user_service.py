"""
Service métier pour la gestion des utilisateurs.
"""

import uuid
import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from schoolcli.repositories import user_repository
from schoolcli.schemas.user import UserCreate, UserResponse, UserUpdate
from schoolcli.schemas.validation import require_id, validate_dto
from schoolcli.services.common import database_errors

logger = logging.getLogger(__name__)


def create_user(db: Session, data: Union[UserCreate, Mapping[str, Any]]) -> UserResponse:
    """
    Crée un utilisateur.
    Lève une ValidationError (sans rien écrire) si l'âge sort de [0, 25] ou si un nom est vide.
    """
    dto = validate_dto(UserCreate, data)
    with database_errors(db, "création utilisateur"):
        user = user_repository.create(db, dto.model_dump())
    logger.info("Utilisateur créé : %s (%s %s)", user.id, user.first_name, user.last_name)
    return user


def list_users(db: Session, **filters: Any) -> list[UserResponse]:
    """Retourne tous les utilisateurs."""
    with database_errors(db, "liste des utilisateurs"):
        return user_repository.find_all(db, **filters)


def get_user(db: Session, user_id: Union[str, uuid.UUID, None]) -> Optional[UserResponse]:
    """Retourne un utilisateur par son ID, ou None si inexistant."""
    user_uuid = require_id(user_id, "utilisateur")
    with database_errors(db, "lecture utilisateur"):
        return user_repository.find(db, user_uuid)


def update_user(
    db: Session,
    user_id: Union[str, uuid.UUID, None],
    data: Union[UserUpdate, Mapping[str, Any]],
) -> Optional[UserResponse]:
    """
    Met à jour les champs fournis d'un utilisateur.
    Retourne None si l'utilisateur n'existe pas.
    """
    user_uuid = require_id(user_id, "utilisateur")
    dto = validate_dto(UserUpdate, data)
    with database_errors(db, "mise à jour utilisateur"):
        return user_repository.find_and_update_by_id(db, user_uuid, dto.model_dump(exclude_unset=True))


def delete_user(db: Session, user_id: Union[str, uuid.UUID, None]) -> bool:
    """
    Supprime un utilisateur et, en cascade, ses profils élève et personnel.
    Retourne True si supprimé, False si introuvable.
    """
    user_uuid = require_id(user_id, "utilisateur")
    with database_errors(db, "suppression utilisateur"):
        deleted = user_repository.delete(db, user_uuid)
    if deleted:
        logger.info("Utilisateur supprimé : %s", user_uuid)
    return deleted
