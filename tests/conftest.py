"""Shared fixtures for catalog tests."""

import pytest

from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.store import InMemoryProductStore


@pytest.fixture
def store() -> InMemoryProductStore:
    """Create an empty in-memory product store."""
    return InMemoryProductStore()


@pytest.fixture
def service(store: InMemoryProductStore) -> CatalogService:
    """Create a catalog service over the in-memory store."""
    return CatalogService(store)
