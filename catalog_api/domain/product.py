"""Product entity and write validation.

The product is the only entity in the catalog. Prices are stored with
fixed precision (18 total digits, 2 fractional digits), so every price
is normalised before it reaches a store.
"""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from catalog_api.domain.exceptions import InvalidProductError

PRICE_PRECISION = 18
PRICE_SCALE = 2
PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_SCALE)
MAX_PRICE = Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE) - PRICE_QUANTUM


@dataclass
class Product:
    """A sellable product.

    Attributes:
        name: Display name, non-blank.
        description: Description, non-blank.
        price: Unit price, strictly positive.
        image: Optional image URL (not validated).
        id: Store-assigned identifier, None until persisted.
    """

    name: str
    description: str
    price: Decimal
    image: str | None = None
    id: int | None = None

    def with_id(self, product_id: int | None) -> "Product":
        """Return a copy carrying the given id."""
        return replace(self, id=product_id)


def normalize_price(value: Any) -> Decimal:
    """Quantize a price to the storage scale.

    Args:
        value: Price as Decimal, int, float or numeric string.

    Returns:
        Price rounded half-up to two decimal places.

    Raises:
        InvalidProductError: If the value is not a finite number or
            does not fit the storage precision.
    """
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidProductError(["price must be a number"]) from None

    if not price.is_finite():
        raise InvalidProductError(["price must be a finite number"])

    overflow = InvalidProductError(
        [f"price exceeds storage precision ({PRICE_PRECISION},{PRICE_SCALE})"]
    )
    # quantize() itself fails past the context precision, so bound first
    if abs(price) > MAX_PRICE + PRICE_QUANTUM:
        raise overflow

    price = price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if abs(price) > MAX_PRICE:
        raise overflow
    return price


def validate_product(candidate: Product) -> Product:
    """Check a candidate against the write invariants.

    Name and description must be non-blank, and the price, once
    normalised to the storage scale, must be strictly positive.

    Args:
        candidate: Product to check.

    Returns:
        Copy of the candidate with its price normalised.

    Raises:
        InvalidProductError: Listing every violated rule.
    """
    errors: list[str] = []

    if not candidate.name or not candidate.name.strip():
        errors.append("name must not be blank")
    if not candidate.description or not candidate.description.strip():
        errors.append("description must not be blank")

    price: Decimal | None = None
    try:
        price = normalize_price(candidate.price)
    except InvalidProductError as e:
        errors.extend(e.errors)
    else:
        if price <= 0:
            errors.append("price must be greater than zero")

    if errors:
        raise InvalidProductError(errors)

    return replace(candidate, price=price)
