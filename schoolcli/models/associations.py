"""
Associations entre les modèles (relationships SQLAlchemy).

    User        1 ── 0..1  Student     suppression en cascade
    User        1 ── 0..1  Staff       suppression en cascade
    SchoolClass 1 ── N     Student     suppression en cascade
    SchoolClass 1 ── N     Staff       suppression en cascade

Les clés étrangères portent déjà ON DELETE CASCADE ; la cascade ORM couvre aussi
les objets déjà chargés dans la session.
"""

import logging

from sqlalchemy import inspect
from sqlalchemy.orm import backref, configure_mappers, relationship

from schoolcli.models import SchoolClass, Staff, Student, User

logger = logging.getLogger(__name__)

_configured = False


def _add_relationship(model, name: str, **kwargs) -> bool:
    """Ajoute une relationship au modèle si elle n'existe pas encore."""
    # has_property() ne déclenche pas la configuration des mappers (contrairement à .attrs)
    if inspect(model).has_property(name):
        return False
    setattr(model, name, relationship(**kwargs))
    return True


def setup_associations() -> None:
    """
    Déclare les relations entre modèles puis configure les mappers.
    Idempotent : un second appel ne duplique aucune relation.
    """
    global _configured
    if _configured:
        return

    added = [
        _add_relationship(
            User, "student",
            argument=Student, uselist=False, cascade="all, delete", backref=backref("user"),
        ),
        _add_relationship(
            User, "staff",
            argument=Staff, uselist=False, cascade="all, delete", backref=backref("user"),
        ),
        _add_relationship(
            SchoolClass, "students",
            argument=Student, cascade="all, delete", backref=backref("school_class"),
        ),
        _add_relationship(
            SchoolClass, "staff",
            argument=Staff, cascade="all, delete", backref=backref("school_class"),
        ),
    ]

    configure_mappers()
    _configured = True
    logger.debug("Associations configurées (%d relations ajoutées)", sum(added))
