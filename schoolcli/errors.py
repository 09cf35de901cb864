"""
Taxonomie des erreurs de la CLI et point de passage unique pour leur affichage.

Les services lèvent ces exceptions ; seule la commande racine décide du code de
sortie, à partir de la valeur retournée par handle_error().
"""

import enum
import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

EXIT_FAILURE = 1


class CLIError(Exception):
    """Erreur de base de la CLI."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CLIError):
    """Entrée invalide : porte la liste complète des champs en erreur."""

    def __init__(self, message: str, violations: Optional[Sequence] = None):
        super().__init__(message)
        self.violations = list(violations or [])

    @classmethod
    def from_violations(cls, violations: Sequence) -> "ValidationError":
        details = "; ".join(f"{v.field}: {v.message}" for v in violations)
        return cls(f"Validation échouée : {details}", violations)


class DatabaseError(CLIError):
    """Problème de persistance (connexion, contrainte, synchronisation du schéma)."""


class ErrorKind(str, enum.Enum):
    VALIDATION = "Validation Error"
    DATABASE = "Database Error"
    CLI = "CLI Error"
    UNKNOWN = "Unknown Error"


def classify_error(error: BaseException) -> ErrorKind:
    """Range une erreur dans l'une des quatre catégories (la plus spécifique d'abord)."""
    if isinstance(error, ValidationError):
        return ErrorKind.VALIDATION
    if isinstance(error, DatabaseError):
        return ErrorKind.DATABASE
    if isinstance(error, CLIError):
        return ErrorKind.CLI
    return ErrorKind.UNKNOWN


def handle_error(error: BaseException, console: Optional[Console] = None) -> int:
    """
    Affiche une ligne classifiée et colorée sur stderr et retourne le code de sortie.
    Ne termine pas le processus : c'est le rôle de l'appelant.
    """
    kind = classify_error(error)
    message = error.message if isinstance(error, CLIError) else str(error)

    if kind is ErrorKind.UNKNOWN:
        logger.error("Erreur inattendue : %s", error, exc_info=error)
    else:
        logger.debug("%s : %s", kind.value, message)

    (console or err_console).print(
        f"[bold red]{kind.value}:[/] [yellow]{escape(message)}[/]",
        soft_wrap=True,
    )
    return EXIT_FAILURE
