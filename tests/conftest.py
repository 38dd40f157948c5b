"""
Fixtures pytest partagees pour les tests du webshop.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports repository (IBeerRepository, ICustomerRepository, IOrderRepository)
- Entites d'exemple (client, commande)
- Session SQLModel sur une base SQLite en memoire
- Settings de test avec chemins temporaires
"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlmodel import Session, SQLModel, create_engine

from webshop.config import Settings
from webshop.core.entities import Customer, Order
from webshop.core.ports.repositories import (
    IBeerRepository,
    ICustomerRepository,
    IOrderRepository,
)
from webshop.infrastructure.persistence import enable_foreign_keys, models  # noqa: F401


@pytest.fixture
def mock_beer_repo() -> MagicMock:
    """Mock de IBeerRepository. Les valeurs de retour sont configurees par test."""
    repo = MagicMock(spec=IBeerRepository)
    repo.get_all.return_value = []
    return repo


@pytest.fixture
def mock_customer_repo() -> MagicMock:
    """Mock de ICustomerRepository."""
    repo = MagicMock(spec=ICustomerRepository)
    repo.get_all.return_value = []
    return repo


@pytest.fixture
def mock_order_repo() -> MagicMock:
    """Mock de IOrderRepository."""
    repo = MagicMock(spec=IOrderRepository)
    repo.get_all.return_value = []
    return repo


@pytest.fixture
def sample_customer() -> Customer:
    """Client deja persiste (id 1)."""
    return Customer(
        id=1,
        first_name="Test",
        last_name="LastTest",
        email="test@testmail.dk",
        address="Address",
        phone_number="+52519631",
    )


@pytest.fixture
def sample_order(sample_customer: Customer) -> Order:
    """Commande valide, pas encore persistee."""
    now = datetime.now()
    return Order(
        customer=sample_customer,
        order_date=now,
        delivery_date=now + timedelta(days=5),
    )


@pytest.fixture
def session() -> Iterator[Session]:
    """Session SQLModel sur une base SQLite en memoire, tables creees, cles etrangeres actives."""
    engine = enable_foreign_keys(create_engine("sqlite:///:memory:"))
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans un repertoire temporaire."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "logs" / "webshop.log",
        default_items_per_page=5,
    )
