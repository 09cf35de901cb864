"""
Point d'entrée principal de la CLI schoolcli.
Démarrage : schoolcli <commande>   (ou python -m schoolcli <commande>)
"""

import logging
import sys
from typing import Optional

import click

from schoolcli import __version__
from schoolcli.commands import class_commands, staff_commands, student_commands, user_commands
from schoolcli.config import settings
from schoolcli.database import create_database
from schoolcli.errors import handle_error

logger = logging.getLogger(__name__)

# Exceptions propres à click (usage, abandon, sortie) : click gère lui-même leur code de sortie
_CLICK_EXCEPTIONS = (click.ClickException, click.exceptions.Abort, click.exceptions.Exit)


class SchoolCLI(click.Group):
    """
    Groupe racine : toute erreur levée par une commande (validation, base de données,
    exception inattendue) passe par handle_error(), qui fixe le code de sortie.
    """

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except _CLICK_EXCEPTIONS:
            raise
        except Exception as exc:
            ctx.exit(handle_error(exc))


@click.group(cls=SchoolCLI, help="CLI de gestion des utilisateurs, élèves, personnel et classes")
@click.version_option(__version__, prog_name="schoolcli")
@click.option("--database-url", default=None, help="URL SQLAlchemy (remplace DATABASE_URL).")
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str]):
    # Une Database peut être fournie par l'appelant (tests) via obj=.
    # Associations et schéma sont créés à la première session : --help ne touche pas la base.
    if ctx.obj is None:
        database = create_database(database_url)
        ctx.call_on_close(database.dispose)
        ctx.obj = database


for module in (user_commands, student_commands, staff_commands, class_commands):
    for command in module.commands:
        cli.add_command(command)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    configure_logging()
    cli(prog_name="schoolcli")


if __name__ == "__main__":
    main()
