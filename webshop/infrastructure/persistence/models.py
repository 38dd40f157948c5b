"""
Modeles SQLModel pour la base de donnees du webshop.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- beers: Catalogue de bieres
- customers: Clients
- orders: Commandes (lignes de commande serialisees en JSON)
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class BeerModel(SQLModel, table=True):
    """Modele representant une biere du catalogue."""

    __tablename__ = "beers"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    brand: str = Field(index=True)
    percentage: float = 0.0
    price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    beer_type: str | None = Field(default=None, index=True)  # valeur de BeerType


class CustomerModel(SQLModel, table=True):
    """Modele representant un client."""

    __tablename__ = "customers"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str
    last_name: str = Field(index=True)
    email: str = Field(index=True)
    address: str
    phone_number: str | None = None


class OrderModel(SQLModel, table=True):
    """
    Modele representant une commande.

    Lie a un client via customer_id (foreign key).
    """

    __tablename__ = "orders"

    id: int | None = Field(default=None, primary_key=True)
    customer_id: int = Field(foreign_key="customers.id", index=True)
    order_date: datetime = Field(sa_type=DateTime)  # naive, heure locale
    delivery_date: datetime = Field(sa_type=DateTime)
    order_lines_json: str | None = None  # JSON: lignes de commande brutes

    @property
    def order_lines(self) -> list[Any]:
        """Retourne les lignes de commande deserialisees."""
        if self.order_lines_json:
            return json.loads(self.order_lines_json)
        return []

    @staticmethod
    def dump_order_lines(value: list[Any]) -> str | None:
        """Serialise les lignes de commande en JSON (None si vide)."""
        return json.dumps(value) if value else None
