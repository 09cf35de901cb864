"""
schoolcli : gestion en ligne de commande des utilisateurs, élèves, personnel et classes.
"""

__version__ = "0.1.0"
