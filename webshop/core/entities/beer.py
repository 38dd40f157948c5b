"""
Entites du catalogue de bieres.

Contient l'entite Beer, l'enumeration des types de biere et l'objet
BeerFilter utilise pour les recherches paginees.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class BeerType(Enum):
    """Type de biere."""

    DARK = "dark"
    BROWN = "brown"
    LIGHT = "light"


class BeerSearchField(Enum):
    """Champ sur lequel portent le tri et la recherche d'un BeerFilter."""

    ID = "id"
    NAME = "name"
    BRAND = "brand"
    PRICE = "price"
    PERCENTAGE = "percentage"
    TYPE = "type"


@dataclass
class Beer:
    """
    Represente une biere du catalogue.

    Un id a 0 signifie que la biere n'a pas encore ete persistee :
    l'identifiant est attribue par le repository lors de la sauvegarde.

    Attributs :
        id : Identifiant (0 = non attribue)
        name : Nom de la biere
        brand : Marque / brasserie
        percentage : Taux d'alcool (% vol.)
        price : Prix unitaire (None = prix non renseigne, 0 est valide)
        beer_type : Type de biere (brune, blonde...)
    """

    id: int = 0
    name: Optional[str] = None
    brand: Optional[str] = None
    percentage: float = 0.0
    price: Optional[Decimal] = None
    beer_type: Optional[BeerType] = None


@dataclass
class BeerFilter:
    """
    Parametres d'une recherche paginee dans le catalogue.

    Transmis tel quel au repository : la pagination, le tri et la recherche
    textuelle sont de sa responsabilite.

    Attributs :
        current_page : Page demandee (commence a 1)
        items_per_page : Nombre de bieres par page
        is_ascending : Sens du tri sur search_field
        search_field : Champ de tri et de recherche
        search_text : Texte recherche dans search_field (optionnel)
    """

    current_page: int = 1
    items_per_page: int = 10
    is_ascending: bool = True
    search_field: BeerSearchField = BeerSearchField.ID
    search_text: Optional[str] = None
