"""
Commandes de gestion du personnel.
"""

import click

from schoolcli.commands.output import print_not_found, print_record, print_success, print_table
from schoolcli.commands.prompts import ask, ask_optional
from schoolcli.database import Database
from schoolcli.services import staff_service


@click.command("add-staff", help="Ajouter un utilisateur au personnel")
@click.pass_obj
def add_staff(database: Database):
    user_id = ask("ID utilisateur")
    class_id = ask_optional("ID classe (facultatif)")
    with database.session() as db:
        staff = staff_service.create_staff(db, {"user_id": user_id, "class_id": class_id})
    print_success("Membre du personnel créé :", staff)


@click.command("list-staff", help="Lister le personnel")
@click.pass_obj
def list_staff(database: Database):
    with database.session() as db:
        members = staff_service.list_staff(db)
    print_table(
        "Personnel",
        ["ID personnel", "ID utilisateur", "ID classe"],
        [(m.staff_id, m.user_id, m.class_id) for m in members],
    )


@click.command("get-staff", help="Afficher un membre du personnel par son ID")
@click.pass_obj
def get_staff(database: Database):
    staff_id = ask("ID personnel")
    with database.session() as db:
        staff = staff_service.get_staff(db, staff_id)
    if staff is None:
        print_not_found("Membre du personnel introuvable.")
        return
    print_record("Personnel :", staff)


@click.command("update-staff", help="Changer la classe d'un membre du personnel (vide pour aucune)")
@click.pass_obj
def update_staff(database: Database):
    staff_id = ask("ID personnel")
    class_id = ask_optional("Nouvel ID classe")
    with database.session() as db:
        staff = staff_service.update_staff(db, staff_id, {"class_id": class_id})
    if staff is None:
        print_not_found("Membre du personnel introuvable.")
        return
    print_success("Membre du personnel mis à jour :", staff)


@click.command("delete-staff", help="Supprimer un membre du personnel")
@click.pass_obj
def delete_staff(database: Database):
    staff_id = ask("ID personnel")
    with database.session() as db:
        deleted = staff_service.delete_staff(db, staff_id)
    if not deleted:
        print_not_found("Impossible de supprimer le membre du personnel : introuvable.")
        return
    print_success("Membre du personnel supprimé.")


commands = [add_staff, list_staff, get_staff, update_staff, delete_staff]
