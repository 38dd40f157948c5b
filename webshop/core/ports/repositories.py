"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance des donnees.
Les implementations (adaptateurs) fournissent les mecanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Les repositories attribuent les identifiants lors de la sauvegarde et
possedent l'etat persiste ; les services ne font que valider et deleguer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from webshop.core.entities.beer import Beer, BeerFilter
from webshop.core.entities.customer import Customer, Order


class IBeerRepository(ABC):
    """
    Interface de stockage du catalogue de bieres.

    Definit les operations pour persister et recuperer les entites Beer.
    """

    @abstractmethod
    def save(self, beer: Beer) -> Beer:
        """Insere une nouvelle biere et retourne sa forme persistee (avec id)."""
        ...

    @abstractmethod
    def get_by_id(self, beer_id: int) -> Optional[Beer]:
        """Recupere une biere par son ID, ou None si inexistante."""
        ...

    @abstractmethod
    def get_all(self) -> list[Beer]:
        """Liste toutes les bieres, sans ordre garanti."""
        ...

    @abstractmethod
    def get_filtered(self, beer_filter: BeerFilter) -> list[Beer]:
        """
        Recupere une page de bieres triee et filtree.

        Args :
            beer_filter : Pagination, champ et sens du tri, texte recherche

        Retourne :
            Les bieres de la page demandee
        """
        ...

    @abstractmethod
    def update(self, beer: Beer) -> Optional[Beer]:
        """Met a jour une biere existante. Retourne None si l'ID est inconnu."""
        ...

    @abstractmethod
    def remove(self, beer_id: int) -> Optional[Beer]:
        """Supprime une biere et retourne la valeur supprimee (None si inconnue)."""
        ...


class ICustomerRepository(ABC):
    """
    Interface de stockage des clients.

    Definit les operations pour persister et recuperer les entites Customer.
    """

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Insere un nouveau client et retourne sa forme persistee."""
        ...

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Recupere un client (avec ses commandes) par son ID."""
        ...

    @abstractmethod
    def get_all(self) -> list[Customer]:
        """Liste tous les clients."""
        ...

    @abstractmethod
    def update(self, customer: Customer) -> Optional[Customer]:
        """Met a jour un client existant. Retourne None si l'ID est inconnu."""
        ...

    @abstractmethod
    def remove(self, customer_id: int) -> Optional[Customer]:
        """Supprime un client et retourne la valeur supprimee."""
        ...


class IOrderRepository(ABC):
    """
    Interface de stockage des commandes.

    Definit les operations pour persister et recuperer les entites Order.
    """

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Insere une nouvelle commande et retourne sa forme persistee."""
        ...

    @abstractmethod
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Recupere une commande par son ID."""
        ...

    @abstractmethod
    def get_all(self) -> list[Order]:
        """Liste toutes les commandes."""
        ...

    @abstractmethod
    def update(self, order: Order) -> Optional[Order]:
        """Met a jour une commande existante. Retourne None si l'ID est inconnu."""
        ...

    @abstractmethod
    def remove(self, order_id: int) -> Optional[Order]:
        """Supprime une commande et retourne la valeur supprimee."""
        ...
