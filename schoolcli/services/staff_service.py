"""
Service métier pour la gestion du personnel.
Un membre du personnel associe un utilisateur existant à une classe facultative.
"""

import uuid
import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from schoolcli.errors import ValidationError
from schoolcli.repositories import class_repository, staff_repository, user_repository
from schoolcli.schemas.staff import StaffCreate, StaffResponse, StaffUpdate
from schoolcli.schemas.validation import FieldViolation, require_id, validate_dto
from schoolcli.services.common import database_errors

logger = logging.getLogger(__name__)


def _class_violation(db: Session, class_id: Optional[uuid.UUID]) -> Optional[FieldViolation]:
    if class_id is not None and class_repository.find(db, class_id) is None:
        return FieldViolation(field="class_id", message="Classe introuvable.", value=str(class_id))
    return None


def create_staff(db: Session, data: Union[StaffCreate, Mapping[str, Any]]) -> StaffResponse:
    """
    Crée un profil personnel.
    Lève une ValidationError si l'utilisateur n'existe pas, s'il est déjà membre
    du personnel, ou si la classe fournie n'existe pas.
    """
    dto = validate_dto(StaffCreate, data)

    with database_errors(db, "création personnel"):
        violations = []
        if user_repository.find(db, dto.user_id) is None:
            violations.append(FieldViolation(field="user_id", message="Utilisateur introuvable.", value=str(dto.user_id)))
        elif staff_repository.find_all(db, user_id=dto.user_id):
            violations.append(FieldViolation(field="user_id", message="Cet utilisateur fait déjà partie du personnel.", value=str(dto.user_id)))
        class_violation = _class_violation(db, dto.class_id)
        if class_violation:
            violations.append(class_violation)
        if violations:
            raise ValidationError.from_violations(violations)

        staff = staff_repository.create(db, dto.model_dump())

    logger.info("Membre du personnel créé : %s (utilisateur %s)", staff.staff_id, staff.user_id)
    return staff


def list_staff(db: Session, **filters: Any) -> list[StaffResponse]:
    """Retourne tout le personnel."""
    with database_errors(db, "liste du personnel"):
        return staff_repository.find_all(db, **filters)


def get_staff(db: Session, staff_id: Union[str, uuid.UUID, None]) -> Optional[StaffResponse]:
    """Retourne un membre du personnel par son ID, ou None si inexistant."""
    staff_uuid = require_id(staff_id, "personnel")
    with database_errors(db, "lecture personnel"):
        return staff_repository.find(db, staff_uuid)


def update_staff(
    db: Session,
    staff_id: Union[str, uuid.UUID, None],
    data: Union[StaffUpdate, Mapping[str, Any]],
) -> Optional[StaffResponse]:
    """Change (ou retire, avec None) la classe d'un membre du personnel."""
    staff_uuid = require_id(staff_id, "personnel")
    dto = validate_dto(StaffUpdate, data)

    with database_errors(db, "mise à jour personnel"):
        if staff_repository.find(db, staff_uuid) is None:
            return None
        class_violation = _class_violation(db, dto.class_id)
        if class_violation:
            raise ValidationError.from_violations([class_violation])
        return staff_repository.find_and_update_by_id(db, staff_uuid, dto.model_dump())


def delete_staff(db: Session, staff_id: Union[str, uuid.UUID, None]) -> bool:
    """Supprime un membre du personnel. Retourne True si supprimé, False si introuvable."""
    staff_uuid = require_id(staff_id, "personnel")
    with database_errors(db, "suppression personnel"):
        deleted = staff_repository.delete(db, staff_uuid)
    if deleted:
        logger.info("Membre du personnel supprimé : %s", staff_uuid)
    return deleted
