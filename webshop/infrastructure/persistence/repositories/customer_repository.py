"""
Implementation SQLModel du repository Customer.

Implemente l'interface ICustomerRepository pour la persistance des clients
dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional

from sqlmodel import Session, select

from webshop.core.entities.customer import Customer, Order
from webshop.core.ports.repositories import ICustomerRepository
from webshop.infrastructure.persistence.models import CustomerModel, OrderModel


def customer_to_entity(model: CustomerModel) -> Customer:
    """Convertit un modele client en entite (sans ses commandes)."""
    return Customer(
        id=model.id or 0,
        first_name=model.first_name,
        last_name=model.last_name,
        email=model.email,
        address=model.address,
        phone_number=model.phone_number,
    )


class SQLModelCustomerRepository(ICustomerRepository):
    """
    Repository SQLModel pour les clients.

    get_by_id remplit la liste des commandes du client ; les commandes
    chargees ainsi ne referencent pas le client en retour.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_model(self, entity: Customer) -> CustomerModel:
        """Convertit une entite domaine en modele DB."""
        return CustomerModel(
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            address=entity.address,
            phone_number=entity.phone_number,
        )

    def _load_orders(self, customer_id: int) -> list[Order]:
        """Charge les commandes d'un client, triees par date de commande."""
        statement = (
            select(OrderModel)
            .where(OrderModel.customer_id == customer_id)
            .order_by(OrderModel.order_date)
        )
        return [
            Order(
                id=model.id or 0,
                order_date=model.order_date,
                delivery_date=model.delivery_date,
                order_lines=model.order_lines,
            )
            for model in self._session.exec(statement).all()
        ]

    def save(self, customer: Customer) -> Customer:
        """Insere un nouveau client et retourne sa forme persistee."""
        model = self._to_model(customer)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return customer_to_entity(model)

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Recupere un client et ses commandes par son ID."""
        model = self._session.get(CustomerModel, customer_id)
        if model is None:
            return None
        customer = customer_to_entity(model)
        customer.orders = self._load_orders(customer_id)
        return customer

    def get_all(self) -> list[Customer]:
        """Liste tous les clients (sans leurs commandes)."""
        models = self._session.exec(select(CustomerModel)).all()
        return [customer_to_entity(model) for model in models]

    def update(self, customer: Customer) -> Optional[Customer]:
        """Met a jour un client existant."""
        existing = self._session.get(CustomerModel, customer.id)
        if existing is None:
            return None

        existing.first_name = customer.first_name
        existing.last_name = customer.last_name
        existing.email = customer.email
        existing.address = customer.address
        existing.phone_number = customer.phone_number
        self._session.add(existing)
        self._session.commit()
        self._session.refresh(existing)
        return customer_to_entity(existing)

    def remove(self, customer_id: int) -> Optional[Customer]:
        """
        Supprime un client et retourne la valeur supprimee.

        Les commandes du client sont supprimees avec lui (aucune commande
        ne reste sans client).
        """
        model = self._session.get(CustomerModel, customer_id)
        if model is None:
            return None

        removed = customer_to_entity(model)
        orders = self._session.exec(
            select(OrderModel).where(OrderModel.customer_id == customer_id)
        ).all()
        for order in orders:
            self._session.delete(order)
        self._session.flush()
        self._session.delete(model)
        self._session.commit()
        return removed
