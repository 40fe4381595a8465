"""Domain exceptions.

All domain-level errors that represent business rule violations.
Each error carries a machine-readable ``kind`` which the API layer
maps onto an HTTP status code and the structured error body.
"""

from typing import Any, ClassVar


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    kind: ClassVar[str] = "domain_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Input Errors
# ============================================================================


class InvalidInputError(DomainError):
    """Raised when a request violates an entity constraint.

    Recoverable by the caller correcting the request.
    """

    kind: ClassVar[str] = "invalid_input"


class InvalidProductError(InvalidInputError):
    """Raised when product fields fail validation."""

    def __init__(self, errors: list[str]) -> None:
        """Initialize invalid product error.

        Args:
            errors: Violated rules, one message per rule.
        """
        super().__init__("Invalid product data", details={"errors": errors})
        self.errors = errors


class ProductIdMismatchError(InvalidInputError):
    """Raised when the id in an update body differs from the target id."""

    def __init__(self, product_id: int, candidate_id: int | None) -> None:
        """Initialize id mismatch error.

        Args:
            product_id: Id of the record being updated.
            candidate_id: Id supplied in the request body.
        """
        super().__init__(
            "Product ID mismatch",
            details={"product_id": product_id, "candidate_id": candidate_id},
        )


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Raised when an operation targets a nonexistent record."""

    kind: ClassVar[str] = "not_found"


class ProductNotFoundError(NotFoundError):
    """Raised when no product exists with the given id."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: The id that was looked up.
        """
        super().__init__("Product not found", details={"product_id": product_id})
        self.product_id = product_id
