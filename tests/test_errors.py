"""
Tests de la classification des erreurs et du point de sortie unique.
"""

import io

import pytest
from rich.console import Console

from schoolcli.errors import (
    CLIError,
    DatabaseError,
    ErrorKind,
    ValidationError,
    classify_error,
    handle_error,
)
from schoolcli.schemas.validation import FieldViolation


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=200), buffer


@pytest.mark.parametrize("error, kind", [
    (ValidationError("x"), ErrorKind.VALIDATION),
    (DatabaseError("x"), ErrorKind.DATABASE),
    (CLIError("x"), ErrorKind.CLI),
    (RuntimeError("x"), ErrorKind.UNKNOWN),
])
def test_classify_error(error, kind):
    assert classify_error(error) is kind


def test_handle_error_retourne_code_1():
    console, buffer = make_console()
    assert handle_error(DatabaseError("connexion perdue"), console=console) == 1
    assert buffer.getvalue().strip() == "Database Error: connexion perdue"


@pytest.mark.parametrize("error, label", [
    (ValidationError("x"), "Validation Error: x"),
    (DatabaseError("x"), "Database Error: x"),
    (CLIError("x"), "CLI Error: x"),
    (RuntimeError("x"), "Unknown Error: x"),
])
def test_handle_error_libelle_par_categorie(error, label):
    console, buffer = make_console()
    handle_error(error, console=console)
    assert buffer.getvalue().strip() == label


def test_handle_error_inconnue_affiche_le_message():
    console, buffer = make_console()
    handle_error(KeyError("clé"), console=console)
    assert buffer.getvalue().startswith("Unknown Error:")


def test_handle_error_message_avec_crochets_non_interprete():
    """Le message n'est pas interprété comme du balisage rich."""
    console, buffer = make_console()
    handle_error(CLIError("valeur [red]"), console=console)
    assert "[red]" in buffer.getvalue()


def test_validation_error_from_violations():
    error = ValidationError.from_violations([
        FieldViolation(field="age", message="trop grand", value=30),
        FieldViolation(field="last_name", message="obligatoire"),
    ])
    assert error.message == "Validation échouée : age: trop grand; last_name: obligatoire"
    assert len(error.violations) == 2
