"""Product repository for database operations.

SQLAlchemy implementation of the product store. Each write runs in
its own committed transaction.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.models import ProductRecord
from catalog_api.catalog.store import ProductStore
from catalog_api.domain.product import Product


class ProductRepository(ProductStore):
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.add(Product(...))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_all(self) -> list[Product]:
        """Get all products ordered by id.

        Returns:
            List of products.
        """
        result = await self.session.execute(
            select(ProductRecord).order_by(ProductRecord.id)
        )
        return [record.to_domain() for record in result.scalars().all()]

    async def get(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        record = await self.session.get(ProductRecord, product_id)
        return record.to_domain() if record else None

    async def add(self, product: Product) -> Product:
        """Insert a product; the database assigns the id.

        Args:
            product: Product to save.

        Returns:
            Saved product with its id.
        """
        record = ProductRecord.from_domain(product)
        self.session.add(record)
        await self.session.flush()
        await self.session.commit()
        return record.to_domain()

    async def replace(self, product: Product) -> Product | None:
        """Overwrite an existing product's fields.

        Args:
            product: Product carrying the target id and new values.

        Returns:
            Updated product, or None if the id does not exist.
        """
        record = await self.session.get(ProductRecord, product.id)
        if record is None:
            return None

        record.apply(product)
        await self.session.flush()
        await self.session.commit()
        return record.to_domain()

    async def remove(self, product_id: int) -> bool:
        """Delete a product.

        Args:
            product_id: Product ID.

        Returns:
            True if deleted, False if it did not exist.
        """
        record = await self.session.get(ProductRecord, product_id)
        if record is None:
            return False

        await self.session.delete(record)
        await self.session.commit()
        return True
