"""Catalog service for product operations.

Validates inbound writes against the product invariants, then
delegates to a product store.
"""

from dataclasses import dataclass

import structlog

from catalog_api.catalog.store import ProductStore
from catalog_api.domain.exceptions import (
    InvalidInputError,
    ProductIdMismatchError,
    ProductNotFoundError,
)
from catalog_api.domain.product import Product, validate_product

logger = structlog.get_logger()


@dataclass
class DeleteResult:
    """Acknowledgement of a deleted product."""

    product_id: int
    message: str = "Product deleted successfully"


class CatalogService:
    """Service for catalog CRUD operations.

    Create and update apply the same validation. Updates overwrite
    every mutable field at once; there is no concurrency token, so
    concurrent updates to one product resolve as last write wins.

    Example usage:
        service = CatalogService(InMemoryProductStore())
        product = await service.create_product(
            Product(name="Blue Shirt", description="Cotton", price=Decimal("19.99"))
        )
    """

    def __init__(self, store: ProductStore) -> None:
        """Initialize service with a product store.

        Args:
            store: Store that persists products.
        """
        self.store = store

    async def list_products(self) -> list[Product]:
        """List all products in store order.

        Returns:
            All products.
        """
        return await self.store.list_all()

    async def get_product(self, product_id: int) -> Product:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = await self.store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, candidate: Product) -> Product:
        """Validate and persist a new product.

        Any id on the candidate is ignored; the store assigns one.

        Args:
            candidate: Product to create.

        Returns:
            The stored product including its id.

        Raises:
            InvalidProductError: If a field violates the invariants.
        """
        try:
            product = validate_product(candidate.with_id(None))
        except InvalidInputError as e:
            logger.warning("Product rejected", kind=e.kind, details=e.details)
            raise

        created = await self.store.add(product)
        logger.info("Product created", product_id=created.id)
        return created

    async def update_product(self, product_id: int, candidate: Product) -> Product:
        """Overwrite an existing product.

        Args:
            product_id: Id of the product to update.
            candidate: New field values; its id must equal product_id.

        Returns:
            The updated product.

        Raises:
            ProductIdMismatchError: If candidate.id differs from product_id.
            InvalidProductError: If a field violates the invariants.
            ProductNotFoundError: If no product has this id.
        """
        try:
            if candidate.id != product_id:
                raise ProductIdMismatchError(product_id, candidate.id)
            product = validate_product(candidate)
        except InvalidInputError as e:
            logger.warning(
                "Product update rejected",
                product_id=product_id,
                kind=e.kind,
                details=e.details,
            )
            raise

        updated = await self.store.replace(product)
        if updated is None:
            raise ProductNotFoundError(product_id)

        logger.info("Product updated", product_id=product_id)
        return updated

    async def delete_product(self, product_id: int) -> DeleteResult:
        """Delete a product permanently.

        Args:
            product_id: Product ID.

        Returns:
            Deletion acknowledgement.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        if not await self.store.remove(product_id):
            raise ProductNotFoundError(product_id)

        logger.info("Product deleted", product_id=product_id)
        return DeleteResult(product_id=product_id)
