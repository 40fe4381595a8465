"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, WithJsonSchema

from catalog_api.domain.product import Product

# Written as an exact JSON number by DecimalJSONResponse
Price = Annotated[Decimal, WithJsonSchema({"type": "number"}, mode="serialization")]


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    kind: str = Field(..., description="Error kind: invalid_input, not_found, internal_error")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product as returned by the API."""

    id: int = Field(..., description="Server-assigned product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Price = Field(..., description="Unit price")
    image: str | None = Field(default=None, description="Image URL")

    @classmethod
    def from_domain(cls, product: Product) -> "ProductSchema":
        """Convert a Product entity to its response schema."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
        )


class ProductRequest(BaseModel):
    """Product body for create and update.

    Field constraints are left to the catalog service so that
    violations are reported as invalid input rather than schema errors.
    The id is ignored on create and must match the path on update.
    """

    id: int | None = Field(default=None, description="Product identifier")
    name: str | None = Field(default=None, description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: Decimal | None = Field(default=None, description="Unit price")
    image: str | None = Field(default=None, description="Image URL")

    def to_domain(self) -> Product:
        """Convert to a Product candidate."""
        return Product(
            id=self.id,
            name=self.name or "",
            description=self.description or "",
            price=self.price if self.price is not None else Decimal(0),
            image=self.image,
        )
