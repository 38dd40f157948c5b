"""
Tests pour les entites du domaine (Beer, Customer, Order, BeerFilter).

Verifie les valeurs par defaut : id 0 (non attribue), champs absents a None.
"""

from webshop.core.entities import Beer, BeerFilter, BeerSearchField, BeerType, Customer, Order
from webshop.core.exceptions import (
    ArgumentError,
    InvalidStateError,
    NullInputError,
    WebshopError,
)


class TestDefaults:
    """Valeurs par defaut des entites."""

    def test_beer_defaults(self):
        beer = Beer()
        assert beer.id == 0
        assert beer.name is None
        assert beer.price is None
        assert beer.beer_type is None

    def test_customer_orders_are_not_shared(self):
        first, second = Customer(), Customer()
        first.orders.append(Order())
        assert second.orders == []

    def test_order_defaults(self):
        order = Order()
        assert order.id == 0
        assert order.customer is None
        assert order.order_lines == []

    def test_beer_filter_defaults(self):
        beer_filter = BeerFilter()
        assert beer_filter.current_page == 1
        assert beer_filter.items_per_page == 10
        assert beer_filter.is_ascending is True
        assert beer_filter.search_field == BeerSearchField.ID
        assert beer_filter.search_text is None

    def test_beer_type_values(self):
        assert BeerType("dark") is BeerType.DARK
        assert {t.value for t in BeerType} == {"dark", "brown", "light"}


class TestExceptionHierarchy:
    """Hierarchie des erreurs metier."""

    def test_null_input_is_invalid_state(self):
        assert issubclass(NullInputError, InvalidStateError)

    def test_all_errors_share_a_base(self):
        for error in (NullInputError, InvalidStateError, ArgumentError):
            assert issubclass(error, WebshopError)
            assert issubclass(error, ValueError)

    def test_argument_error_is_not_invalid_state(self):
        assert not issubclass(ArgumentError, InvalidStateError)
