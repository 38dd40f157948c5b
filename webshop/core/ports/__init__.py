"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des donnees
- IBeerRepository : Stockage du catalogue (avec recherche paginee)
- ICustomerRepository : Stockage des clients
- IOrderRepository : Stockage des commandes
"""

from webshop.core.ports.repositories import (
    IBeerRepository,
    ICustomerRepository,
    IOrderRepository,
)

__all__ = [
    "IBeerRepository",
    "ICustomerRepository",
    "IOrderRepository",
]
