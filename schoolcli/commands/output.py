"""
Affichage console des résultats de commande (rich).
"""

from typing import Iterable, Optional, Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _format(record: BaseModel) -> str:
    return escape(str(record.model_dump(mode="json")))


def print_success(message: str, record: Optional[BaseModel] = None) -> None:
    """Ligne de succès, suivie de l'enregistrement sérialisé s'il est fourni."""
    line = f"[green]{escape(message)}[/]"
    if record is not None:
        line += f" {_format(record)}"
    console.print(line, soft_wrap=True)


def print_record(label: str, record: BaseModel) -> None:
    console.print(f"[cyan]{escape(label)}[/] {_format(record)}", soft_wrap=True)


def print_not_found(message: str) -> None:
    console.print(f"[yellow]{escape(message)}[/]", soft_wrap=True)


def print_table(title: str, columns: Sequence[str], rows: Iterable[Sequence[object]]) -> None:
    """Affiche une liste d'enregistrements ; un message explicite si elle est vide."""
    rows = list(rows)
    if not rows:
        console.print(f"[yellow]{escape(title)} : aucun enregistrement.[/]", soft_wrap=True)
        return

    table = Table(title=f"{title} ({len(rows)})")
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in rows:
        table.add_row(*(escape("" if value is None else str(value)) for value in row))
    console.print(table)
