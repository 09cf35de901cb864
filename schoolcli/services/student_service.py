"""
Service métier pour la gestion des élèves.
Un élève associe un utilisateur existant à une classe existante.
"""

import uuid
import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from schoolcli.errors import ValidationError
from schoolcli.repositories import class_repository, student_repository, user_repository
from schoolcli.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from schoolcli.schemas.validation import FieldViolation, require_id, validate_dto
from schoolcli.services.common import database_errors

logger = logging.getLogger(__name__)


def create_student(db: Session, data: Union[StudentCreate, Mapping[str, Any]]) -> StudentResponse:
    """
    Crée un profil élève.
    Lève une ValidationError si l'utilisateur ou la classe n'existe pas,
    ou si l'utilisateur est déjà élève.
    """
    dto = validate_dto(StudentCreate, data)

    with database_errors(db, "création élève"):
        violations = []
        if user_repository.find(db, dto.user_id) is None:
            violations.append(FieldViolation(field="user_id", message="Utilisateur introuvable.", value=str(dto.user_id)))
        elif student_repository.find_all(db, user_id=dto.user_id):
            violations.append(FieldViolation(field="user_id", message="Cet utilisateur est déjà élève.", value=str(dto.user_id)))
        if class_repository.find(db, dto.class_id) is None:
            violations.append(FieldViolation(field="class_id", message="Classe introuvable.", value=str(dto.class_id)))
        if violations:
            raise ValidationError.from_violations(violations)

        student = student_repository.create(db, dto.model_dump())

    logger.info("Élève créé : %s (utilisateur %s, classe %s)", student.student_id, student.user_id, student.class_id)
    return student


def list_students(db: Session, **filters: Any) -> list[StudentResponse]:
    """Retourne tous les élèves (filtrables, par exemple par class_id)."""
    with database_errors(db, "liste des élèves"):
        return student_repository.find_all(db, **filters)


def get_student(db: Session, student_id: Union[str, uuid.UUID, None]) -> Optional[StudentResponse]:
    """Retourne un élève par son ID, ou None si inexistant."""
    student_uuid = require_id(student_id, "élève")
    with database_errors(db, "lecture élève"):
        return student_repository.find(db, student_uuid)


def update_student(
    db: Session,
    student_id: Union[str, uuid.UUID, None],
    data: Union[StudentUpdate, Mapping[str, Any]],
) -> Optional[StudentResponse]:
    """Change la classe d'un élève. Retourne None si l'élève n'existe pas."""
    student_uuid = require_id(student_id, "élève")
    dto = validate_dto(StudentUpdate, data)

    with database_errors(db, "mise à jour élève"):
        if student_repository.find(db, student_uuid) is None:
            return None
        if class_repository.find(db, dto.class_id) is None:
            raise ValidationError.from_violations([
                FieldViolation(field="class_id", message="Classe introuvable.", value=str(dto.class_id)),
            ])
        return student_repository.find_and_update_by_id(db, student_uuid, dto.model_dump())


def delete_student(db: Session, student_id: Union[str, uuid.UUID, None]) -> bool:
    """Supprime un élève. Retourne True si supprimé, False si introuvable."""
    student_uuid = require_id(student_id, "élève")
    with database_errors(db, "suppression élève"):
        deleted = student_repository.delete(db, student_uuid)
    if deleted:
        logger.info("Élève supprimé : %s", student_uuid)
    return deleted
