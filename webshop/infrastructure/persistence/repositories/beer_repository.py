"""
Implementation SQLModel du repository Beer.

Implemente l'interface IBeerRepository pour la persistance du catalogue
dans la base de donnees SQLite via SQLModel, y compris la recherche paginee.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from sqlmodel import Session, col, select

from webshop.core.entities.beer import Beer, BeerFilter, BeerSearchField, BeerType
from webshop.core.exceptions import ArgumentError
from webshop.core.ports.repositories import IBeerRepository
from webshop.infrastructure.persistence.models import BeerModel
from webshop.utils import constants

# Colonne triee / filtree pour chaque champ de recherche
_SEARCH_COLUMNS = {
    BeerSearchField.ID: BeerModel.id,
    BeerSearchField.NAME: BeerModel.name,
    BeerSearchField.BRAND: BeerModel.brand,
    BeerSearchField.PRICE: BeerModel.price,
    BeerSearchField.PERCENTAGE: BeerModel.percentage,
    BeerSearchField.TYPE: BeerModel.beer_type,
}

# Champs texte : recherche par sous-chaine insensible a la casse
_TEXT_FIELDS = frozenset({BeerSearchField.NAME, BeerSearchField.BRAND})


class SQLModelBeerRepository(IBeerRepository):
    """
    Repository SQLModel pour le catalogue.

    Implemente IBeerRepository avec conversion bidirectionnelle
    entre l'entite Beer (domaine) et BeerModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: BeerModel) -> Beer:
        """Convertit un modele DB en entite domaine."""
        return Beer(
            id=model.id or 0,
            name=model.name,
            brand=model.brand,
            percentage=model.percentage,
            price=Decimal(model.price) if model.price is not None else None,
            beer_type=BeerType(model.beer_type) if model.beer_type else None,
        )

    def _to_model(self, entity: Beer) -> BeerModel:
        """Convertit une entite domaine en modele DB (sans id : attribue par la BDD)."""
        return BeerModel(
            name=entity.name,
            brand=entity.brand,
            percentage=entity.percentage,
            price=entity.price,
            beer_type=entity.beer_type.value if entity.beer_type else None,
        )

    def save(self, beer: Beer) -> Beer:
        """Insere une nouvelle biere et retourne sa forme persistee."""
        model = self._to_model(beer)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def get_by_id(self, beer_id: int) -> Optional[Beer]:
        """Recupere une biere par son ID."""
        model = self._session.get(BeerModel, beer_id)
        if model:
            return self._to_entity(model)
        return None

    def get_all(self) -> list[Beer]:
        """Liste toutes les bieres."""
        models = self._session.exec(select(BeerModel)).all()
        return [self._to_entity(model) for model in models]

    def get_filtered(self, beer_filter: BeerFilter) -> list[Beer]:
        """
        Recupere une page de bieres triee et filtree.

        Le tri porte sur search_field (departage par id). Si search_text est
        fourni, seules les bieres dont search_field correspond sont gardees :
        sous-chaine pour les champs texte, egalite pour les autres.

        Raises :
            ArgumentError : Pagination invalide ou texte incompatible avec le champ
        """
        if beer_filter.current_page < 1 or beer_filter.items_per_page < 1:
            raise ArgumentError(constants.INVALID_PAGINATION)

        column = col(_SEARCH_COLUMNS[beer_filter.search_field])
        statement = select(BeerModel)

        if beer_filter.search_text:
            if beer_filter.search_field in _TEXT_FIELDS:
                statement = statement.where(column.ilike(f"%{beer_filter.search_text}%"))
            else:
                value = self._parse_search_value(
                    beer_filter.search_field, beer_filter.search_text
                )
                statement = statement.where(column == value)

        order = column.asc() if beer_filter.is_ascending else column.desc()
        statement = (
            statement.order_by(order, col(BeerModel.id))
            .offset((beer_filter.current_page - 1) * beer_filter.items_per_page)
            .limit(beer_filter.items_per_page)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def _parse_search_value(self, field: BeerSearchField, text: str) -> Any:
        """Convertit le texte recherche vers le type de la colonne."""
        try:
            if field == BeerSearchField.ID:
                return int(text)
            if field == BeerSearchField.PRICE:
                return Decimal(text)
            if field == BeerSearchField.PERCENTAGE:
                return float(text)
            return BeerType(text.strip().lower()).value
        except (ValueError, InvalidOperation) as e:
            raise ArgumentError(constants.INVALID_SEARCH_TEXT) from e

    def update(self, beer: Beer) -> Optional[Beer]:
        """Met a jour une biere existante."""
        existing = self._session.get(BeerModel, beer.id)
        if existing is None:
            return None

        existing.name = beer.name
        existing.brand = beer.brand
        existing.percentage = beer.percentage
        existing.price = beer.price
        existing.beer_type = beer.beer_type.value if beer.beer_type else None
        self._session.add(existing)
        self._session.commit()
        self._session.refresh(existing)
        return self._to_entity(existing)

    def remove(self, beer_id: int) -> Optional[Beer]:
        """Supprime une biere et retourne la valeur supprimee."""
        model = self._session.get(BeerModel, beer_id)
        if model is None:
            return None

        removed = self._to_entity(model)
        self._session.delete(model)
        self._session.commit()
        return removed
