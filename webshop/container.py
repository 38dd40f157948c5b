"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
repositories SQLModel et services metier.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelBeerRepository,
    SQLModelCustomerRepository,
    SQLModelOrderRepository,
)
from .services.beer_service import BeerService
from .services.customer_service import CustomerService
from .services.order_service import OrderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        beer_service = container.beer_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    beer_repository = providers.Factory(
        SQLModelBeerRepository,
        session=session,
    )
    customer_repository = providers.Factory(
        SQLModelCustomerRepository,
        session=session,
    )
    order_repository = providers.Factory(
        SQLModelOrderRepository,
        session=session,
    )

    # Services - Factory car dependent de repositories (sessions fraiches)
    beer_service = providers.Factory(
        BeerService,
        repository=beer_repository,
    )
    customer_service = providers.Factory(
        CustomerService,
        repository=customer_repository,
    )
    order_service = providers.Factory(
        OrderService,
        repository=order_repository,
    )
