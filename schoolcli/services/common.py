"""
Outils partagés par les services.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from schoolcli.errors import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def database_errors(db: Session, action: str) -> Iterator[None]:
    """
    Convertit toute erreur SQLAlchemy levée par le repository en DatabaseError.
    La transaction en cours est annulée ; la décision de terminer revient à la commande racine.
    """
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        logger.error("Contrainte d'intégrité violée (%s) : %s", action, exc.orig)
        raise DatabaseError(f"Échec ({action}) : contrainte d'intégrité violée ({exc.orig})") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Erreur base de données (%s) : %s", action, exc)
        raise DatabaseError(f"Échec ({action}) : {exc}") from exc
