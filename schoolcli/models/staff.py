"""
Modèle SQLAlchemy pour la table staff.
Un membre du personnel relie un utilisateur (1:1) à une classe facultative.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Uuid, func

from schoolcli.database import Base


class Staff(Base):
    __tablename__ = "staff"

    staff_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    class_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("classes.id", ondelete="CASCADE"),
        nullable=True,
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
