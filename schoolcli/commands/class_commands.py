"""
Commandes de gestion des classes.
"""

import click

from schoolcli.commands.output import print_not_found, print_record, print_success, print_table
from schoolcli.commands.prompts import ask
from schoolcli.database import Database
from schoolcli.services import class_service


@click.command("add-class", help="Créer une classe")
@click.pass_obj
def add_class(database: Database):
    name = ask("Nom de la classe")
    with database.session() as db:
        school_class = class_service.create_class(db, {"name": name})
    print_success("Classe créée :", school_class)


@click.command("list-classes", help="Lister les classes")
@click.pass_obj
def list_classes(database: Database):
    with database.session() as db:
        classes = class_service.list_classes(db)
    print_table(
        "Classes",
        ["ID", "Nom", "Élèves", "Personnel"],
        [(c.id, c.name, c.nb_students, c.nb_staff) for c in classes],
    )


@click.command("get-class", help="Afficher une classe par son ID")
@click.pass_obj
def get_class(database: Database):
    class_id = ask("ID classe")
    with database.session() as db:
        school_class = class_service.get_class(db, class_id)
    if school_class is None:
        print_not_found("Classe introuvable.")
        return
    print_record("Classe :", school_class)


@click.command("update-class", help="Renommer une classe")
@click.pass_obj
def update_class(database: Database):
    class_id = ask("ID classe")
    name = ask("Nouveau nom")
    with database.session() as db:
        school_class = class_service.update_class(db, class_id, {"name": name})
    if school_class is None:
        print_not_found("Classe introuvable.")
        return
    print_success("Classe mise à jour :", school_class)


@click.command("delete-class", help="Supprimer une classe (et ses élèves et son personnel)")
@click.pass_obj
def delete_class(database: Database):
    class_id = ask("ID classe")
    with database.session() as db:
        deleted = class_service.delete_class(db, class_id)
    if not deleted:
        print_not_found("Impossible de supprimer la classe : introuvable.")
        return
    print_success("Classe supprimée.")


commands = [add_class, list_classes, get_class, update_class, delete_class]
