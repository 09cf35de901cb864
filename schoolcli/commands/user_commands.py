"""
Commandes de gestion des utilisateurs.
"""

import click

from schoolcli.commands.output import print_not_found, print_record, print_success, print_table
from schoolcli.commands.prompts import ask, ask_optional
from schoolcli.database import Database
from schoolcli.services import user_service


@click.command("create-user", help="Créer un utilisateur")
@click.pass_obj
def create_user(database: Database):
    first_name = ask("Prénom")
    last_name = ask("Nom")
    age = ask_optional("Âge (facultatif)")

    data = {"first_name": first_name, "last_name": last_name}
    if age is not None:
        data["age"] = age

    with database.session() as db:
        user = user_service.create_user(db, data)
    print_success("Utilisateur créé :", user)


@click.command("list-users", help="Lister les utilisateurs")
@click.pass_obj
def list_users(database: Database):
    with database.session() as db:
        users = user_service.list_users(db)
    print_table(
        "Utilisateurs",
        ["ID", "Prénom", "Nom", "Âge"],
        [(u.id, u.first_name, u.last_name, u.age) for u in users],
    )


@click.command("get-user", help="Afficher un utilisateur par son ID")
@click.pass_obj
def get_user(database: Database):
    user_id = ask("ID utilisateur")
    with database.session() as db:
        user = user_service.get_user(db, user_id)
    if user is None:
        print_not_found("Utilisateur introuvable.")
        return
    print_record("Utilisateur :", user)


@click.command("update-user", help="Modifier un utilisateur (laisser vide pour conserver)")
@click.pass_obj
def update_user(database: Database):
    user_id = ask("ID utilisateur")
    answers = {
        "first_name": ask_optional("Prénom"),
        "last_name": ask_optional("Nom"),
        "age": ask_optional("Âge"),
    }
    data = {field: value for field, value in answers.items() if value is not None}

    with database.session() as db:
        user = user_service.update_user(db, user_id, data)
    if user is None:
        print_not_found("Utilisateur introuvable.")
        return
    print_success("Utilisateur mis à jour :", user)


@click.command("delete-user", help="Supprimer un utilisateur (et ses profils élève/personnel)")
@click.pass_obj
def delete_user(database: Database):
    user_id = ask("ID utilisateur")
    with database.session() as db:
        deleted = user_service.delete_user(db, user_id)
    if not deleted:
        print_not_found("Impossible de supprimer l'utilisateur : introuvable.")
        return
    print_success("Utilisateur supprimé.")


commands = [create_user, list_users, get_user, update_user, delete_user]
