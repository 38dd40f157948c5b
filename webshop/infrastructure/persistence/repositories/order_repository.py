"""
Implementation SQLModel du repository Order.

Implemente l'interface IOrderRepository. Le client d'une commande est stocke
par son ID et reconstruit (sans ses commandes) a la lecture ; les lignes de
commande sont serialisees en JSON.
"""

from typing import Optional

from sqlmodel import Session, select

from webshop.core.entities.customer import Customer, Order
from webshop.core.exceptions import InvalidStateError
from webshop.core.ports.repositories import IOrderRepository
from webshop.infrastructure.persistence.models import CustomerModel, OrderModel
from webshop.infrastructure.persistence.repositories.customer_repository import (
    customer_to_entity,
)
from webshop.utils import constants


class SQLModelOrderRepository(IOrderRepository):
    """
    Repository SQLModel pour les commandes.

    Implemente IOrderRepository avec conversion bidirectionnelle
    entre l'entite Order (domaine) et OrderModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: OrderModel) -> Order:
        """Convertit un modele DB en entite domaine, client inclus."""
        customer_model = self._session.get(CustomerModel, model.customer_id)
        return Order(
            id=model.id or 0,
            customer=customer_to_entity(customer_model) if customer_model else None,
            order_date=model.order_date,
            delivery_date=model.delivery_date,
            order_lines=model.order_lines,
        )

    def _require_customer(self, customer: Optional[Customer]) -> None:
        """Refuse une commande dont le client n'existe pas en base."""
        if customer is None or self._session.get(CustomerModel, customer.id) is None:
            raise InvalidStateError(constants.ORDER_UNKNOWN_CUSTOMER)

    def _to_model(self, entity: Order) -> OrderModel:
        """Convertit une entite domaine en modele DB."""
        return OrderModel(
            customer_id=entity.customer.id,
            order_date=entity.order_date,
            delivery_date=entity.delivery_date,
            order_lines_json=OrderModel.dump_order_lines(entity.order_lines),
        )

    def save(self, order: Order) -> Order:
        """Insere une nouvelle commande et retourne sa forme persistee."""
        self._require_customer(order.customer)
        model = self._to_model(order)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Recupere une commande par son ID."""
        model = self._session.get(OrderModel, order_id)
        if model:
            return self._to_entity(model)
        return None

    def get_all(self) -> list[Order]:
        """Liste toutes les commandes."""
        models = self._session.exec(select(OrderModel)).all()
        return [self._to_entity(model) for model in models]

    def update(self, order: Order) -> Optional[Order]:
        """Met a jour une commande existante (client, dates et lignes)."""
        existing = self._session.get(OrderModel, order.id)
        if existing is None:
            return None

        if order.customer is not None:
            self._require_customer(order.customer)
            existing.customer_id = order.customer.id
        existing.order_date = order.order_date
        existing.delivery_date = order.delivery_date
        existing.order_lines_json = OrderModel.dump_order_lines(order.order_lines)
        self._session.add(existing)
        self._session.commit()
        self._session.refresh(existing)
        return self._to_entity(existing)

    def remove(self, order_id: int) -> Optional[Order]:
        """Supprime une commande et retourne la valeur supprimee."""
        model = self._session.get(OrderModel, order_id)
        if model is None:
            return None

        removed = self._to_entity(model)
        self._session.delete(model)
        self._session.commit()
        return removed
