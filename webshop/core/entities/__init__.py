"""
Business entities representing core domain concepts.

Entities are plain mutable dataclasses carrying data between the
services and the repositories. An id of 0 means "not yet persisted".

Exports:
- Beer, BeerType: Catalog item and its type
- BeerFilter, BeerSearchField: Paginated search parameters
- Customer: Webshop customer
- Order: Customer order
"""

from webshop.core.entities.beer import Beer, BeerFilter, BeerSearchField, BeerType
from webshop.core.entities.customer import Customer, Order

__all__ = [
    "Beer",
    "BeerFilter",
    "BeerSearchField",
    "BeerType",
    "Customer",
    "Order",
]
