"""
Validation des DTO : transforme les erreurs Pydantic en liste de violations par champ.
"""

import uuid
from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from schoolcli.errors import ValidationError

T = TypeVar("T", bound=BaseModel)


class FieldViolation(BaseModel):
    """Détail d'un champ rejeté."""
    field: str
    message: str
    value: Optional[Any] = None


def _violations_from(exc: PydanticValidationError) -> List[FieldViolation]:
    violations = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__root__"
        violations.append(FieldViolation(
            field=field,
            message=err["msg"],
            value=err.get("input"),
        ))
    return violations


def collect_violations(schema: Type[T], data: Mapping[str, Any]) -> List[FieldViolation]:
    """Retourne toutes les violations de `data` vis-à-vis de `schema` (liste vide si valide)."""
    try:
        schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        return _violations_from(exc)
    return []


def validate_dto(schema: Type[T], data: Union[T, Mapping[str, Any]]) -> T:
    """
    Valide `data` contre `schema` et retourne le DTO.
    Lève une ValidationError portant toutes les violations, pas seulement la première.
    """
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError.from_violations(_violations_from(exc)) from exc


def require_id(value: Union[str, uuid.UUID, None], label: str) -> uuid.UUID:
    """
    Vérifie qu'un identifiant est fourni et bien formé avant tout accès au repository.
    """
    if isinstance(value, uuid.UUID):
        return value
    if value is None or not str(value).strip():
        raise ValidationError(f"L'identifiant {label} est obligatoire.")
    try:
        return uuid.UUID(str(value).strip())
    except ValueError:
        raise ValidationError.from_violations([
            FieldViolation(field="id", message=f"L'identifiant {label} doit être un UUID.", value=value),
        ])
