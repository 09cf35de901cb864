# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# Les relationships sont ajoutées ensuite par associations.setup_associations().

from schoolcli.models.user import User  # noqa: F401  (doit précéder students et staff)
from schoolcli.models.school_class import SchoolClass  # noqa: F401
from schoolcli.models.student import Student  # noqa: F401
from schoolcli.models.staff import Staff  # noqa: F401
