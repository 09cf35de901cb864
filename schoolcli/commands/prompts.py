"""
Saisie interactive des champs.
Pas de nouvelle demande en cas de saisie invalide : la validation est faite par le service.
"""

from typing import Optional

import click


def ask(label: str) -> str:
    """Demande une valeur ; une réponse vide est acceptée et renvoyée telle quelle."""
    return click.prompt(label, default="", show_default=False).strip()


def ask_optional(label: str) -> Optional[str]:
    """Demande une valeur facultative ; None si la réponse est vide."""
    return ask(label) or None
