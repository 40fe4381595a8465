"""Tests for the Product entity and write validation."""

from decimal import Decimal

import pytest

from catalog_api.domain import (
    MAX_PRICE,
    InvalidInputError,
    InvalidProductError,
    Product,
    ProductIdMismatchError,
    ProductNotFoundError,
    normalize_price,
    validate_product,
)


def make_product(
    name: str = "Blue Shirt",
    description: str = "Cotton shirt",
    price: Decimal = Decimal("19.99"),
) -> Product:
    """Create a test product."""
    return Product(name=name, description=description, price=price)


class TestNormalizePrice:
    """Tests for price normalisation."""

    def test_keeps_two_places(self) -> None:
        assert normalize_price(Decimal("19.99")) == Decimal("19.99")

    def test_pads_to_two_places(self) -> None:
        price = normalize_price(5)
        assert price == Decimal("5")
        assert str(price) == "5.00"

    def test_rounds_half_up(self) -> None:
        assert normalize_price(Decimal("1.005")) == Decimal("1.01")
        assert normalize_price(Decimal("1.004")) == Decimal("1.00")

    def test_accepts_numeric_strings_and_floats(self) -> None:
        assert normalize_price("10.5") == Decimal("10.50")
        assert normalize_price(0.1) == Decimal("0.10")

    def test_largest_storable_price(self) -> None:
        assert normalize_price(MAX_PRICE) == MAX_PRICE

    @pytest.mark.parametrize(
        "value",
        [Decimal("1e16"), Decimal("9999999999999999.995"), Decimal("1e40")],
    )
    def test_rejects_prices_beyond_precision(self, value: Decimal) -> None:
        with pytest.raises(InvalidProductError):
            normalize_price(value)

    @pytest.mark.parametrize("value", ["abc", None, Decimal("NaN"), Decimal("Infinity")])
    def test_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(InvalidProductError):
            normalize_price(value)


class TestValidateProduct:
    """Tests for write validation."""

    def test_valid_product_passes(self) -> None:
        product = validate_product(make_product(price=Decimal("19.999")))
        assert product.name == "Blue Shirt"
        assert product.price == Decimal("20.00")

    def test_does_not_mutate_candidate(self) -> None:
        candidate = make_product(price=Decimal("19.999"))
        validate_product(candidate)
        assert candidate.price == Decimal("19.999")

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_rejects_blank_name(self, name: str) -> None:
        with pytest.raises(InvalidProductError) as exc_info:
            validate_product(make_product(name=name))
        assert exc_info.value.errors == ["name must not be blank"]

    def test_rejects_blank_description(self) -> None:
        with pytest.raises(InvalidProductError) as exc_info:
            validate_product(make_product(description=" "))
        assert exc_info.value.errors == ["description must not be blank"]

    @pytest.mark.parametrize("price", ["0", "-1", "0.004"])
    def test_rejects_non_positive_price(self, price: str) -> None:
        with pytest.raises(InvalidProductError) as exc_info:
            validate_product(make_product(price=Decimal(price)))
        assert exc_info.value.errors == ["price must be greater than zero"]

    def test_reports_every_violation(self) -> None:
        with pytest.raises(InvalidProductError) as exc_info:
            validate_product(make_product(name="", description="", price=Decimal(0)))

        error = exc_info.value
        assert len(error.errors) == 3
        assert error.message == "Invalid product data"
        assert error.details == {"errors": error.errors}
        assert error.kind == "invalid_input"


class TestErrors:
    """Tests for the error taxonomy."""

    def test_not_found_carries_id(self) -> None:
        error = ProductNotFoundError(42)
        assert error.kind == "not_found"
        assert error.message == "Product not found"
        assert error.details == {"product_id": 42}

    def test_id_mismatch_is_invalid_input(self) -> None:
        error = ProductIdMismatchError(1, 2)
        assert isinstance(error, InvalidInputError)
        assert error.message == "Product ID mismatch"
        assert error.details == {"product_id": 1, "candidate_id": 2}
