"""
Modèle SQLAlchemy pour les utilisateurs.
Un utilisateur peut porter au plus un profil élève et un profil personnel.
"""

import uuid
from sqlalchemy import Column, DateTime, Integer, String, Uuid, func

from schoolcli.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=True)  # 0 à 25, contrôlé par le DTO
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
