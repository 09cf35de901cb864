"""
Schémas Pydantic pour les classes.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, field_validator


class ClassCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de la classe ne peut pas être vide.")
        return v.strip()


class ClassUpdate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de la classe ne peut pas être vide.")
        return v.strip()


class ClassResponse(BaseModel):
    id: uuid.UUID
    name: str
    nb_students: int = 0
    nb_staff: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
