"""Product store contract and in-memory implementation.

A store persists product records and assigns their identifiers. It
does not validate: the catalog service checks invariants before any
write reaches the store.
"""

from abc import ABC, abstractmethod
from dataclasses import replace

from catalog_api.domain.product import Product


class ProductStore(ABC):
    """Durable product storage.

    Each operation is atomic for the record it touches. There are no
    cross-record transactions and no concurrency tokens: concurrent
    writes to the same id resolve as last write wins.
    """

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in store iteration order (ascending id)."""

    @abstractmethod
    async def get(self, product_id: int) -> Product | None:
        """Return the product with this id, or None."""

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Persist a new product under a freshly assigned id.

        Any id already on the product is ignored.

        Returns:
            The stored product, including its id.
        """

    @abstractmethod
    async def replace(self, product: Product) -> Product | None:
        """Overwrite every mutable field of an existing product.

        Returns:
            The updated product, or None if no record has its id.
        """

    @abstractmethod
    async def remove(self, product_id: int) -> bool:
        """Delete a product permanently.

        Returns:
            True if a record was deleted, False if none existed.
        """


# ============================================================================
# In-Memory Store
# ============================================================================


class InMemoryProductStore(ProductStore):
    """In-memory product store.

    Ids start at 1 and are never reused, even after deletion. Records
    are copied on the way in and out so callers cannot mutate stored
    state. No operation awaits midway, so each one is atomic under
    the event loop.
    """

    def __init__(self) -> None:
        self._products: dict[int, Product] = {}
        self._next_id = 1

    async def list_all(self) -> list[Product]:
        return [replace(p) for _, p in sorted(self._products.items())]

    async def get(self, product_id: int) -> Product | None:
        product = self._products.get(product_id)
        return replace(product) if product else None

    async def add(self, product: Product) -> Product:
        stored = product.with_id(self._next_id)
        self._products[stored.id] = stored
        self._next_id += 1
        return replace(stored)

    async def replace(self, product: Product) -> Product | None:
        if product.id not in self._products:
            return None
        stored = replace(product)
        self._products[product.id] = stored
        return replace(stored)

    async def remove(self, product_id: int) -> bool:
        return self._products.pop(product_id, None) is not None

    def __len__(self) -> int:
        return len(self._products)


# Global store instance
_product_store: InMemoryProductStore | None = None


def get_product_store() -> InMemoryProductStore:
    """Get in-memory product store singleton."""
    global _product_store
    if _product_store is None:
        _product_store = InMemoryProductStore()
    return _product_store


def reset_product_store() -> None:
    """Reset in-memory product store (for testing)."""
    global _product_store
    _product_store = InMemoryProductStore()
