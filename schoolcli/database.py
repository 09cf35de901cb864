"""
Configuration de la connexion à la base de données.
Utilise SQLAlchemy avec un moteur synchrone.

Le moteur n'est plus global : un objet Database est construit explicitement
(par la commande racine ou par les tests), initialisé une seule fois avant
toute commande, puis libéré à la fin du processus.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from schoolcli.errors import DatabaseError

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite n'applique les clés étrangères (et donc ON DELETE CASCADE) qu'avec ce PRAGMA."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    """Crée le moteur SQLAlchemy adapté au dialecte de l'URL."""
    parsed = make_url(url)
    kwargs = {"echo": echo}

    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        # Une base en mémoire n'existe que le temps d'une connexion : on la partage
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)

    if parsed.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


class Database:
    """Poignée explicite sur la base : moteur, fabrique de sessions et cycle de vie."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = build_engine(url, echo=echo)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self) -> None:
        """
        Configure les associations puis crée les tables manquantes.
        Doit être appelé avant toute opération ; les appels suivants sont sans effet.
        Import local pour éviter les imports circulaires (models → database).
        """
        if self._initialized:
            return

        from schoolcli.models.associations import setup_associations

        setup_associations()
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            logger.error("Synchronisation du schéma impossible : %s", exc)
            raise DatabaseError(f"Synchronisation de la base impossible : {exc}") from exc

        self._initialized = True
        logger.info("Base initialisée (%s)", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Fournit une session et la ferme après usage."""
        if not self._initialized:
            self.init()
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()
        self._initialized = False


def create_database(url: Optional[str] = None, echo: Optional[bool] = None) -> Database:
    """Construit une Database à partir des paramètres fournis ou de la configuration."""
    from schoolcli.config import settings

    return Database(
        url or settings.DATABASE_URL,
        echo=settings.SQL_ECHO if echo is None else echo,
    )
