"""Shared fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from catalog_api.api.products import get_store
from catalog_api.catalog.store import InMemoryProductStore
from catalog_api.main import app


@pytest.fixture
def client(store: InMemoryProductStore) -> Iterator[TestClient]:
    """Create test client backed by an in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def product_body() -> dict:
    """Valid product request body."""
    return {
        "name": "Blue Shirt",
        "description": "Cotton shirt",
        "price": 19.99,
        "image": "https://example.com/shirt.png",
    }
