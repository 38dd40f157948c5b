"""
Service des commandes.

Valide les commandes avant creation, mise a jour et suppression, puis
delegue au repository des commandes.
"""

from datetime import datetime
from typing import Optional

from loguru import logger

from webshop.core.entities.customer import Order
from webshop.core.exceptions import ArgumentError, InvalidStateError, NullInputError
from webshop.core.ports.repositories import IOrderRepository
from webshop.utils import constants


def _is_aware(value: datetime) -> bool:
    """True si la date porte un fuseau horaire exploitable."""
    return value.tzinfo is not None and value.utcoffset() is not None


class OrderService:
    """
    Service de validation et d'orchestration des commandes.

    Example:
        service = OrderService(repository=order_repo)
        order = service.add_order(
            Order(customer=customer, order_date=now, delivery_date=now + timedelta(days=3))
        )
    """

    def __init__(self, repository: IOrderRepository) -> None:
        """
        Initialise le service.

        Args:
            repository: Repository des commandes
        """
        self._repository = repository

    def add_order(self, order: Optional[Order]) -> Order:
        """
        Valide puis sauvegarde une nouvelle commande.

        Ordre des controles : entree nulle, id existant, date de livraison,
        date de commande, client, fuseaux horaires compatibles, puis
        coherence des deux dates.

        Args:
            order: La commande a creer (id a 0)

        Returns:
            La commande retournee par le repository (avec son id attribue)

        Raises:
            NullInputError: Si order est None
            InvalidStateError: Si une regle de creation n'est pas respectee
        """
        if order is None:
            raise NullInputError(constants.INPUT_IS_NULL)
        if order.id != 0:
            raise InvalidStateError(constants.ORDER_WITH_EXISTING_ID)
        if order.delivery_date is None:
            raise InvalidStateError(constants.ORDER_WITHOUT_DELIVERY_DATE)
        if order.order_date is None:
            raise InvalidStateError(constants.ORDER_WITHOUT_ORDER_DATE)
        if order.customer is None:
            raise InvalidStateError(constants.ORDER_WITHOUT_CUSTOMER)
        if _is_aware(order.order_date) != _is_aware(order.delivery_date):
            raise InvalidStateError(constants.ORDER_DATES_TIMEZONE_MISMATCH)
        if order.delivery_date < order.order_date:
            raise InvalidStateError(constants.ORDER_DELIVERY_BEFORE_ORDER)

        saved = self._repository.save(order)
        logger.info(f"Commande enregistree pour le client {order.customer.id}")
        return saved

    def get_orders(self) -> list[Order]:
        """Retourne toutes les commandes."""
        return list(self._repository.get_all())

    def get_order_by_id(self, order_id: int) -> Optional[Order]:
        """Recupere une commande par ID."""
        if order_id <= 0:
            raise InvalidStateError(constants.ID_MUST_BE_POSITIVE)
        return self._repository.get_by_id(order_id)

    def update_order(self, order: Optional[Order]) -> Optional[Order]:
        """
        Met a jour une commande existante.

        Raises:
            ArgumentError: Si order est None ou si son id vaut 0
        """
        if order is None:
            raise ArgumentError(constants.MISSING_UPDATE_DATA)
        if order.id == 0:
            raise ArgumentError(constants.MISSING_ORDER_ID)

        updated = self._repository.update(order)
        logger.info(f"Commande {order.id} mise a jour")
        return updated

    def remove_order(self, order_id: int) -> Optional[Order]:
        """Supprime une commande et retourne la valeur supprimee."""
        if order_id == 0:
            raise ArgumentError(constants.MISSING_ORDER_ID)

        removed = self._repository.remove(order_id)
        logger.info(f"Suppression de la commande {order_id}")
        return removed
