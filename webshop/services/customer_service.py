"""
Service des clients.
"""

from typing import Optional

from loguru import logger

from webshop.core.entities.customer import Customer
from webshop.core.exceptions import ArgumentError, InvalidStateError, NullInputError
from webshop.core.ports.repositories import ICustomerRepository
from webshop.utils import constants


class CustomerService:
    """Service de validation et d'orchestration des clients."""

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repository = repository

    def add_customer(self, customer: Optional[Customer]) -> Customer:
        """
        Valide puis sauvegarde un nouveau client.

        Ordre des controles : entree nulle, id existant, prenom, nom,
        email, adresse. Le telephone est optionnel.

        Raises:
            NullInputError: Si customer est None
            InvalidStateError: Si une regle de creation n'est pas respectee
        """
        if customer is None:
            raise NullInputError(constants.INPUT_IS_NULL)
        if customer.id != 0:
            raise InvalidStateError(constants.CUSTOMER_WITH_EXISTING_ID)
        if not customer.first_name:
            raise InvalidStateError(constants.CUSTOMER_WITHOUT_FIRST_NAME)
        if not customer.last_name:
            raise InvalidStateError(constants.CUSTOMER_WITHOUT_LAST_NAME)
        if not customer.email:
            raise InvalidStateError(constants.CUSTOMER_WITHOUT_EMAIL)
        if not customer.address:
            raise InvalidStateError(constants.CUSTOMER_WITHOUT_ADDRESS)

        saved = self._repository.save(customer)
        logger.info(f"Client ajoute: {customer.first_name} {customer.last_name}")
        return saved

    def get_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        """Recupere un client par ID."""
        if customer_id == 0:
            raise ArgumentError(constants.MISSING_CUSTOMER_ID)
        return self._repository.get_by_id(customer_id)

    def get_all_customers(self) -> list[Customer]:
        """Retourne tous les clients, dans l'ordre du repository."""
        return list(self._repository.get_all())

    def update_customer(self, customer: Optional[Customer]) -> Optional[Customer]:
        """Met a jour un client existant (id obligatoire)."""
        if customer is None:
            raise ArgumentError(constants.MISSING_UPDATE_DATA)
        if customer.id == 0:
            raise ArgumentError(constants.MISSING_CUSTOMER_ID)

        updated = self._repository.update(customer)
        logger.info(f"Client {customer.id} mis a jour")
        return updated

    def remove_customer(self, customer_id: int) -> Optional[Customer]:
        """Supprime un client et retourne la valeur supprimee."""
        if customer_id == 0:
            raise ArgumentError(constants.MISSING_CUSTOMER_ID)

        removed = self._repository.remove(customer_id)
        logger.info(f"Suppression du client {customer_id}")
        return removed
