"""
Tests for BeerService - catalog validation and query orchestration.

Tests covering:
- Creation rules (null input, existing id, name, price, brand) and their order
- ID validation on lookup
- Price sorting (both directions, stability) and type filtering
- Pass-through of filtered search, removal and update
"""

import sys
from decimal import Decimal

import pytest

from webshop.core.entities import Beer, BeerFilter, BeerSearchField, BeerType
from webshop.core.exceptions import InvalidStateError, NullInputError
from webshop.services.beer_service import BeerService


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def service(mock_beer_repo):
    """Create a BeerService backed by the mock repository."""
    return BeerService(repository=mock_beer_repo)


def make_beer(**overrides) -> Beer:
    """Build a valid, unsaved beer."""
    values = dict(
        name="Best_Beer",
        brand="Best_Brand",
        percentage=5.0,
        price=Decimal("1"),
        beer_type=BeerType.DARK,
    )
    values.update(overrides)
    return Beer(**values)


# ============================================================================
# Tests: add_beer
# ============================================================================


class TestAddBeer:
    """Creation rules for add_beer."""

    def test_null_beer_raises(self, service, mock_beer_repo):
        with pytest.raises(NullInputError, match="Input is null!"):
            service.add_beer(None)
        mock_beer_repo.save.assert_not_called()

    def test_null_input_is_an_invalid_state(self, service):
        with pytest.raises(InvalidStateError):
            service.add_beer(None)

    def test_existing_id_raises(self, service, mock_beer_repo):
        with pytest.raises(InvalidStateError) as exc_info:
            service.add_beer(make_beer(id=1))
        assert str(exc_info.value) == "Cannot add a Beer with existing id!"
        mock_beer_repo.save.assert_not_called()

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_name_raises(self, service, mock_beer_repo, name):
        with pytest.raises(InvalidStateError) as exc_info:
            service.add_beer(make_beer(name=name))
        assert str(exc_info.value) == "Cannot add a Beer without name!"
        mock_beer_repo.save.assert_not_called()

    def test_missing_price_raises(self, service, mock_beer_repo):
        with pytest.raises(InvalidStateError) as exc_info:
            service.add_beer(make_beer(price=None))
        assert str(exc_info.value) == "Cannot add a Beer without price!"
        mock_beer_repo.save.assert_not_called()

    @pytest.mark.parametrize("brand", [None, ""])
    def test_missing_brand_raises(self, service, mock_beer_repo, brand):
        with pytest.raises(InvalidStateError) as exc_info:
            service.add_beer(make_beer(brand=brand))
        assert str(exc_info.value) == "Cannot add a Beer without brand!"
        mock_beer_repo.save.assert_not_called()

    def test_existing_id_is_reported_before_missing_fields(self, service):
        beer = Beer(id=3)
        with pytest.raises(InvalidStateError, match="existing id"):
            service.add_beer(beer)

    def test_missing_name_is_reported_before_price_and_brand(self, service):
        beer = Beer(percentage=5.0)
        with pytest.raises(InvalidStateError, match="without name"):
            service.add_beer(beer)

    def test_missing_price_is_reported_before_brand(self, service):
        beer = Beer(name="Best_Beer")
        with pytest.raises(InvalidStateError, match="without price"):
            service.add_beer(beer)

    def test_zero_price_is_accepted(self, service, mock_beer_repo):
        beer = make_beer(price=Decimal("0"))
        service.add_beer(beer)
        mock_beer_repo.save.assert_called_once_with(beer)

    def test_valid_beer_is_saved_once(self, service, mock_beer_repo):
        beer = make_beer()
        service.add_beer(beer)
        mock_beer_repo.save.assert_called_once_with(beer)

    def test_returns_repository_result_unmodified(self, service, mock_beer_repo):
        saved = make_beer(id=42)
        mock_beer_repo.save.return_value = saved
        assert service.add_beer(make_beer()) is saved


# ============================================================================
# Tests: get_beer_by_id / get_beers
# ============================================================================


class TestGetBeerById:
    """ID validation for get_beer_by_id."""

    @pytest.mark.parametrize("beer_id", [0, -1, -sys.maxsize - 1])
    def test_invalid_id_raises(self, service, mock_beer_repo, beer_id):
        with pytest.raises(InvalidStateError) as exc_info:
            service.get_beer_by_id(beer_id)
        assert str(exc_info.value) == "ID must be greater than 0!"
        mock_beer_repo.get_by_id.assert_not_called()

    def test_calls_repository_once(self, service, mock_beer_repo):
        service.get_beer_by_id(1)
        mock_beer_repo.get_by_id.assert_called_once_with(1)

    def test_not_found_is_passed_through(self, service, mock_beer_repo):
        mock_beer_repo.get_by_id.return_value = None
        assert service.get_beer_by_id(7) is None


class TestGetBeers:
    """Full scan."""

    def test_calls_get_all_once(self, service, mock_beer_repo):
        service.get_beers()
        mock_beer_repo.get_all.assert_called_once_with()

    def test_returns_all_beers(self, service, mock_beer_repo):
        beers = [make_beer(id=1), make_beer(id=2)]
        mock_beer_repo.get_all.return_value = beers
        assert service.get_beers() == beers


# ============================================================================
# Tests: get_beers_by_price
# ============================================================================


class TestGetBeersByPrice:
    """Sorting by price."""

    @pytest.fixture
    def catalog(self, mock_beer_repo):
        max_price = Decimal(sys.maxsize)
        beers = [
            make_beer(id=1, price=Decimal("1")),
            make_beer(id=2, price=Decimal("100")),
            make_beer(id=3, price=Decimal("50")),
            make_beer(id=4, price=max_price),
        ]
        mock_beer_repo.get_all.return_value = beers
        return beers

    @pytest.mark.parametrize("ascending", [True, False])
    def test_calls_get_all_once(self, service, mock_beer_repo, catalog, ascending):
        service.get_beers_by_price(ascending)
        mock_beer_repo.get_all.assert_called_once_with()

    def test_ascending_order(self, service, catalog):
        result = service.get_beers_by_price(True)
        assert [beer.id for beer in result] == [1, 3, 2, 4]

    def test_descending_order(self, service, catalog):
        result = service.get_beers_by_price(False)
        assert [beer.id for beer in result] == [4, 2, 3, 1]

    @pytest.mark.parametrize("ascending", [True, False])
    def test_equal_prices_keep_repository_order(self, service, mock_beer_repo, ascending):
        mock_beer_repo.get_all.return_value = [
            make_beer(id=1, price=Decimal("2")),
            make_beer(id=2, price=Decimal("5")),
            make_beer(id=3, price=Decimal("2")),
            make_beer(id=4, price=Decimal("5")),
        ]
        result = service.get_beers_by_price(ascending)
        expected = [1, 3, 2, 4] if ascending else [2, 4, 1, 3]
        assert [beer.id for beer in result] == expected

    def test_empty_catalog(self, service):
        assert service.get_beers_by_price(True) == []


# ============================================================================
# Tests: get_beers_by_type
# ============================================================================


class TestGetBeersByType:
    """Filtering by type."""

    @pytest.fixture
    def catalog(self, mock_beer_repo):
        beers = [
            make_beer(id=1, name="Best_Beer_Dark_1", beer_type=BeerType.DARK),
            make_beer(id=2, name="Bestes_Beer_Brown_1", beer_type=BeerType.BROWN),
            make_beer(id=3, name="Best_Beer_Dark_2", beer_type=BeerType.DARK),
            make_beer(id=4, name="Best_Beer_Light_1", beer_type=BeerType.LIGHT),
            make_beer(id=5, name="Bestes_Beer_Brown_2", beer_type=BeerType.BROWN),
            make_beer(id=6, name="Best_Beer_Light_2", beer_type=BeerType.LIGHT),
        ]
        mock_beer_repo.get_all.return_value = beers
        return beers

    def test_calls_get_all_once(self, service, mock_beer_repo, catalog):
        service.get_beers_by_type(BeerType.BROWN)
        mock_beer_repo.get_all.assert_called_once_with()

    @pytest.mark.parametrize(
        "beer_type, expected_ids",
        [
            (BeerType.DARK, [1, 3]),
            (BeerType.BROWN, [2, 5]),
            (BeerType.LIGHT, [4, 6]),
        ],
    )
    def test_returns_exact_subset_in_order(self, service, catalog, beer_type, expected_ids):
        result = service.get_beers_by_type(beer_type)
        assert [beer.id for beer in result] == expected_ids
        assert all(beer.beer_type == beer_type for beer in result)

    def test_no_match_returns_empty_list(self, service, mock_beer_repo):
        mock_beer_repo.get_all.return_value = [make_beer(beer_type=BeerType.DARK)]
        assert service.get_beers_by_type(BeerType.LIGHT) == []


# ============================================================================
# Tests: get_filtered_beers / remove_beer / update_beer
# ============================================================================


class TestPassThroughOperations:
    """Operations delegated to the repository without validation."""

    def test_filtered_calls_repository_once_with_same_filter(self, service, mock_beer_repo):
        beer_filter = BeerFilter(
            current_page=1,
            items_per_page=10,
            is_ascending=True,
            search_field=BeerSearchField.ID,
        )
        service.get_filtered_beers(beer_filter)
        mock_beer_repo.get_filtered.assert_called_once()
        assert mock_beer_repo.get_filtered.call_args.args[0] is beer_filter

    def test_filtered_returns_repository_result_unchanged(self, service, mock_beer_repo):
        page = [make_beer(id=9)]
        mock_beer_repo.get_filtered.return_value = page
        assert service.get_filtered_beers(BeerFilter()) is page

    def test_remove_calls_repository(self, service, mock_beer_repo):
        beer = make_beer()
        service.remove_beer(beer.id)
        mock_beer_repo.remove.assert_called_once_with(0)

    def test_remove_returns_removed_value(self, service, mock_beer_repo):
        removed = make_beer(id=3)
        mock_beer_repo.remove.return_value = removed
        assert service.remove_beer(3) is removed

    def test_update_calls_repository(self, service, mock_beer_repo):
        beer = make_beer()
        service.update_beer(beer)
        mock_beer_repo.update.assert_called_once_with(beer)
