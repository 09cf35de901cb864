"""
Schémas Pydantic pour les utilisateurs.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

AGE_MIN = 0
AGE_MAX = 25


class UserCreate(BaseModel):
    first_name: str
    last_name: str
    age: Optional[int] = Field(default=None, ge=AGE_MIN, le=AGE_MAX)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class UserUpdate(BaseModel):
    """Mise à jour partielle : seuls les champs fournis sont modifiés."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=AGE_MIN, le=AGE_MAX)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        # Un None explicite viderait une colonne NOT NULL
        if v is None or not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class UserResponse(BaseModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    age: Optional[int]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
