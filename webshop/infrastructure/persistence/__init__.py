"""
Module de persistance SQLite pour le webshop.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from webshop.infrastructure.persistence.database import (
    enable_foreign_keys,
    get_engine,
    get_session,
    init_db,
)
from webshop.infrastructure.persistence.models import (
    BeerModel,
    CustomerModel,
    OrderModel,
)

__all__ = [
    "enable_foreign_keys",
    "get_engine",
    "get_session",
    "init_db",
    "BeerModel",
    "CustomerModel",
    "OrderModel",
]
