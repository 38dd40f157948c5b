"""
Application services layer (use cases).

Services validate their inputs and orchestrate calls to the repository
ports from core/. They never depend on concrete implementations from
infrastructure/ and hold no state besides the injected repository.

This layer contains:
- BeerService: catalog rules, price sorting, type filtering, paginated search
- OrderService: order creation, update and removal rules
- CustomerService: customer creation, update and removal rules
"""

from webshop.services.beer_service import BeerService
from webshop.services.customer_service import CustomerService
from webshop.services.order_service import OrderService

__all__ = [
    "BeerService",
    "CustomerService",
    "OrderService",
]
