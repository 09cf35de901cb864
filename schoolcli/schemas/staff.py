"""
Schémas Pydantic pour le personnel.
La classe est facultative : un membre du personnel peut n'être rattaché à aucune classe.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class StaffCreate(BaseModel):
    user_id: uuid.UUID
    class_id: Optional[uuid.UUID] = None


class StaffUpdate(BaseModel):
    class_id: Optional[uuid.UUID]  # obligatoire, None détache de la classe


class StaffResponse(BaseModel):
    staff_id: uuid.UUID
    user_id: uuid.UUID
    class_id: Optional[uuid.UUID]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
