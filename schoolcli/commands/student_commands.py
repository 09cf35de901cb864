"""
Commandes de gestion des élèves.
"""

import click

from schoolcli.commands.output import print_not_found, print_record, print_success, print_table
from schoolcli.commands.prompts import ask
from schoolcli.database import Database
from schoolcli.services import student_service


@click.command("add-student", help="Inscrire un utilisateur comme élève d'une classe")
@click.pass_obj
def add_student(database: Database):
    user_id = ask("ID utilisateur")
    class_id = ask("ID classe")
    with database.session() as db:
        student = student_service.create_student(db, {"user_id": user_id, "class_id": class_id})
    print_success("Élève créé :", student)


@click.command("list-students", help="Lister les élèves")
@click.pass_obj
def list_students(database: Database):
    with database.session() as db:
        students = student_service.list_students(db)
    print_table(
        "Élèves",
        ["ID élève", "ID utilisateur", "ID classe"],
        [(s.student_id, s.user_id, s.class_id) for s in students],
    )


@click.command("get-student", help="Afficher un élève par son ID")
@click.pass_obj
def get_student(database: Database):
    student_id = ask("ID élève")
    with database.session() as db:
        student = student_service.get_student(db, student_id)
    if student is None:
        print_not_found("Élève introuvable.")
        return
    print_record("Élève :", student)


@click.command("update-student", help="Changer la classe d'un élève")
@click.pass_obj
def update_student(database: Database):
    student_id = ask("ID élève")
    class_id = ask("Nouvel ID classe")
    with database.session() as db:
        student = student_service.update_student(db, student_id, {"class_id": class_id})
    if student is None:
        print_not_found("Élève introuvable.")
        return
    print_success("Élève mis à jour :", student)


@click.command("delete-student", help="Supprimer un élève")
@click.pass_obj
def delete_student(database: Database):
    student_id = ask("ID élève")
    with database.session() as db:
        deleted = student_service.delete_student(db, student_id)
    if not deleted:
        print_not_found("Impossible de supprimer l'élève : introuvable.")
        return
    print_success("Élève supprimé.")


commands = [add_student, list_students, get_student, update_student, delete_student]
