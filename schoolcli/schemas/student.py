"""
Schémas Pydantic pour les élèves.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel


class StudentCreate(BaseModel):
    user_id: uuid.UUID
    class_id: uuid.UUID


class StudentUpdate(BaseModel):
    """Seule la classe d'un élève peut changer."""
    class_id: uuid.UUID


class StudentResponse(BaseModel):
    student_id: uuid.UUID
    user_id: uuid.UUID
    class_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
