"""Product Catalog.

Product storage, the catalog CRUD service and the query pipeline
that searches, sorts and paginates products for display.
"""

from catalog_api.catalog.generator import GeneratorConfig, SampleProductGenerator
from catalog_api.catalog.query import (
    ProductPage,
    SortKey,
    ViewParams,
    run_query,
)
from catalog_api.catalog.service import CatalogService, DeleteResult
from catalog_api.catalog.store import (
    InMemoryProductStore,
    ProductStore,
    get_product_store,
    reset_product_store,
)

__all__ = [
    # Store
    "ProductStore",
    "InMemoryProductStore",
    "get_product_store",
    "reset_product_store",
    # Service
    "CatalogService",
    "DeleteResult",
    # Query
    "ProductPage",
    "SortKey",
    "ViewParams",
    "run_query",
    # Generator
    "GeneratorConfig",
    "SampleProductGenerator",
]
