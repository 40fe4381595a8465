"""Domain layer.

Contains the Product entity, its validation rules and the domain
error taxonomy.
"""

from catalog_api.domain.exceptions import (
    DomainError,
    InvalidInputError,
    InvalidProductError,
    NotFoundError,
    ProductIdMismatchError,
    ProductNotFoundError,
)
from catalog_api.domain.product import (
    MAX_PRICE,
    PRICE_PRECISION,
    PRICE_SCALE,
    Product,
    normalize_price,
    validate_product,
)

__all__ = [
    # Entity
    "Product",
    "normalize_price",
    "validate_product",
    "MAX_PRICE",
    "PRICE_PRECISION",
    "PRICE_SCALE",
    # Errors
    "DomainError",
    "InvalidInputError",
    "InvalidProductError",
    "NotFoundError",
    "ProductIdMismatchError",
    "ProductNotFoundError",
]
