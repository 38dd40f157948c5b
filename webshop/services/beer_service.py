"""
Service du catalogue de bieres.

Valide les bieres avant leur creation et orchestre les lectures du
catalogue (tri par prix, filtre par type, recherche paginee).

Responsabilites:
- Regles de creation (id absent, nom, prix et marque obligatoires)
- Controle des IDs de lecture
- Tri et filtrage locaux apres un unique appel au repository
"""

from operator import attrgetter
from typing import Optional

from loguru import logger

from webshop.core.entities.beer import Beer, BeerFilter, BeerType
from webshop.core.exceptions import InvalidStateError, NullInputError
from webshop.core.ports.repositories import IBeerRepository
from webshop.utils import constants


class BeerService:
    """
    Service de validation et d'orchestration du catalogue.

    Sans etat en dehors du repository injecte : une instance peut etre
    partagee entre threads.

    Example:
        service = BeerService(repository=beer_repo)
        beer = service.add_beer(Beer(name="Leffe", brand="AB InBev", price=Decimal("2.5")))
        cheapest_first = service.get_beers_by_price(ascending=True)
    """

    def __init__(self, repository: IBeerRepository) -> None:
        """
        Initialise le service.

        Args:
            repository: Repository du catalogue de bieres
        """
        self._repository = repository

    def add_beer(self, beer: Optional[Beer]) -> Beer:
        """
        Valide puis sauvegarde une nouvelle biere.

        Les regles sont verifiees dans l'ordre : entree nulle, id existant,
        nom, prix, marque. Un prix de 0 est accepte, seul un prix absent
        est refuse.

        Args:
            beer: La biere a creer (id a 0)

        Returns:
            La biere retournee par le repository

        Raises:
            NullInputError: Si beer est None
            InvalidStateError: Si une regle de creation n'est pas respectee
        """
        if beer is None:
            raise NullInputError(constants.INPUT_IS_NULL)
        if beer.id != 0:
            raise InvalidStateError(constants.BEER_WITH_EXISTING_ID)
        if not beer.name:
            raise InvalidStateError(constants.BEER_WITHOUT_NAME)
        if beer.price is None:
            raise InvalidStateError(constants.BEER_WITHOUT_PRICE)
        if not beer.brand:
            raise InvalidStateError(constants.BEER_WITHOUT_BRAND)

        saved = self._repository.save(beer)
        logger.info(f"Biere ajoutee: {beer.name} ({beer.brand})")
        return saved

    def get_beer_by_id(self, beer_id: int) -> Optional[Beer]:
        """Recupere une biere par ID (None si le repository ne la trouve pas)."""
        if beer_id <= 0:
            raise InvalidStateError(constants.ID_MUST_BE_POSITIVE)
        return self._repository.get_by_id(beer_id)

    def get_beers(self) -> list[Beer]:
        """Retourne toutes les bieres, sans ordre particulier."""
        return list(self._repository.get_all())

    def get_beers_by_price(self, ascending: bool) -> list[Beer]:
        """
        Retourne le catalogue trie par prix.

        Le tri est stable dans les deux sens : les bieres de meme prix
        conservent l'ordre renvoye par le repository.

        Args:
            ascending: True pour du moins cher au plus cher

        Returns:
            Liste des bieres triee par prix
        """
        beers = self._repository.get_all()
        logger.debug(f"Tri par prix ({'croissant' if ascending else 'decroissant'})")
        return sorted(beers, key=attrgetter("price"), reverse=not ascending)

    def get_beers_by_type(self, beer_type: BeerType) -> list[Beer]:
        """Retourne les bieres du type demande, dans l'ordre du repository."""
        return [beer for beer in self._repository.get_all() if beer.beer_type == beer_type]

    def get_filtered_beers(self, beer_filter: BeerFilter) -> list[Beer]:
        """Delegue la recherche paginee au repository, filtre transmis tel quel."""
        return self._repository.get_filtered(beer_filter)

    def remove_beer(self, beer_id: int) -> Optional[Beer]:
        """Supprime une biere. Le controle de l'ID est laisse au repository."""
        removed = self._repository.remove(beer_id)
        logger.info(f"Suppression de la biere {beer_id}")
        return removed

    def update_beer(self, beer: Beer) -> Optional[Beer]:
        """Met a jour une biere sans validation supplementaire."""
        return self._repository.update(beer)
