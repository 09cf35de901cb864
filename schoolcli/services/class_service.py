"""
Service métier pour la gestion des classes.
"""

import uuid
import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from schoolcli.repositories import class_repository
from schoolcli.schemas.school_class import ClassCreate, ClassResponse, ClassUpdate
from schoolcli.schemas.validation import require_id, validate_dto
from schoolcli.services.common import database_errors

logger = logging.getLogger(__name__)


def create_class(db: Session, data: Union[ClassCreate, Mapping[str, Any]]) -> ClassResponse:
    """Crée une nouvelle classe."""
    dto = validate_dto(ClassCreate, data)
    with database_errors(db, "création classe"):
        school_class = class_repository.create(db, dto.model_dump())
    logger.info("Classe créée : %s (%s)", school_class.name, school_class.id)
    return school_class


def list_classes(db: Session, **filters: Any) -> list[ClassResponse]:
    """Retourne toutes les classes, triées par nom."""
    with database_errors(db, "liste des classes"):
        return class_repository.find_all(db, **filters)


def get_class(db: Session, class_id: Union[str, uuid.UUID, None]) -> Optional[ClassResponse]:
    """Retourne une classe par son ID, ou None si inexistante."""
    class_uuid = require_id(class_id, "classe")
    with database_errors(db, "lecture classe"):
        return class_repository.find(db, class_uuid)


def update_class(
    db: Session,
    class_id: Union[str, uuid.UUID, None],
    data: Union[ClassUpdate, Mapping[str, Any]],
) -> Optional[ClassResponse]:
    """Renomme une classe. Retourne None si elle n'existe pas."""
    class_uuid = require_id(class_id, "classe")
    dto = validate_dto(ClassUpdate, data)
    with database_errors(db, "mise à jour classe"):
        return class_repository.find_and_update_by_id(db, class_uuid, dto.model_dump())


def delete_class(db: Session, class_id: Union[str, uuid.UUID, None]) -> bool:
    """
    Supprime une classe ainsi que ses élèves et son personnel (cascade).
    Retourne True si supprimée, False si introuvable.
    """
    class_uuid = require_id(class_id, "classe")
    with database_errors(db, "suppression classe"):
        deleted = class_repository.delete(db, class_uuid)
    if deleted:
        logger.info("Classe supprimée : %s", class_uuid)
    return deleted
