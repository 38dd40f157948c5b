"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans webshop/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from webshop.infrastructure.persistence.repositories.beer_repository import (
    SQLModelBeerRepository,
)
from webshop.infrastructure.persistence.repositories.customer_repository import (
    SQLModelCustomerRepository,
)
from webshop.infrastructure.persistence.repositories.order_repository import (
    SQLModelOrderRepository,
)

__all__ = [
    "SQLModelBeerRepository",
    "SQLModelCustomerRepository",
    "SQLModelOrderRepository",
]
