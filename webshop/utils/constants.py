"""
Constantes globales du webshop.

Messages d'erreur des regles de validation. Les textes sont repris tels
quels par la CLI : ne pas les modifier sans adapter les clients.
"""

# Commun
INPUT_IS_NULL = "Input is null!"
ID_MUST_BE_POSITIVE = "ID must be greater than 0!"
MISSING_UPDATE_DATA = "Missing update data!"

# Bieres
BEER_WITH_EXISTING_ID = "Cannot add a Beer with existing id!"
BEER_WITHOUT_NAME = "Cannot add a Beer without name!"
BEER_WITHOUT_PRICE = "Cannot add a Beer without price!"
BEER_WITHOUT_BRAND = "Cannot add a Beer without brand!"

# Commandes
ORDER_WITH_EXISTING_ID = "Cannot save an order with an already existing ID!"
ORDER_WITHOUT_DELIVERY_DATE = "Cannot save an order without delivery date!"
ORDER_WITHOUT_ORDER_DATE = "Cannot save an order without order date!"
ORDER_WITHOUT_CUSTOMER = "Cannot save an order without a customer!"
ORDER_DELIVERY_BEFORE_ORDER = (
    "Cannot save an order with a delivery date before the order date!"
)
ORDER_DATES_TIMEZONE_MISMATCH = (
    "Cannot save an order mixing naive and timezone-aware dates!"
)
ORDER_UNKNOWN_CUSTOMER = "Cannot save an order for an unknown customer!"
MISSING_ORDER_ID = "Missing order ID!"

# Clients
CUSTOMER_WITH_EXISTING_ID = "Cannot add customer with existing ID!"
CUSTOMER_WITHOUT_FIRST_NAME = "Cannot add customer without first name!"
CUSTOMER_WITHOUT_LAST_NAME = "Cannot add customer without last name!"
CUSTOMER_WITHOUT_EMAIL = "Cannot add customer without email address!"
CUSTOMER_WITHOUT_ADDRESS = "Cannot add customer without address!"
MISSING_CUSTOMER_ID = "Missing customer ID!"

# Recherche paginee (repository SQL)
INVALID_PAGINATION = "Current page and items per page must be greater than 0!"
INVALID_SEARCH_TEXT = "Invalid search text!"
