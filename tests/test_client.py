"""Tests for the Catalog API client.

Requests are routed straight into the application through an ASGI
transport, backed by an in-memory store.
"""

from collections.abc import AsyncIterator
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import httpx
import pytest
import pytest_asyncio

from catalog_api.api.products import get_store
from catalog_api.catalog.query import SortKey, ViewParams
from catalog_api.catalog.store import InMemoryProductStore
from catalog_api.client import (
    CatalogClient,
    CatalogClientError,
    product_from_json,
    product_to_json,
)
from catalog_api.domain.exceptions import InvalidInputError, NotFoundError
from catalog_api.domain.product import Product
from catalog_api.main import app


def make_product(name: str = "Blue Shirt", price: str = "19.99") -> Product:
    """Create a test product."""
    return Product(
        name=name,
        description="Cotton shirt",
        price=Decimal(price),
        image="https://example.com/shirt.png",
    )


@pytest_asyncio.fixture
async def client(store: InMemoryProductStore) -> AsyncIterator[CatalogClient]:
    """Create a client wired to the app."""
    app.dependency_overrides[get_store] = lambda: store
    async with CatalogClient(
        "http://testserver", transport=httpx.ASGITransport(app=app)
    ) as catalog_client:
        yield catalog_client
    app.dependency_overrides.clear()


class TestProductConversion:
    """Tests for JSON conversion helpers."""

    def test_from_json_keeps_cents(self) -> None:
        product = product_from_json(
            {"id": 3, "name": "Hat", "description": "Wool", "price": 0.1, "image": None}
        )
        assert product.price == Decimal("0.1")
        assert product.id == 3

    def test_to_json_sends_price_as_string(self) -> None:
        body = product_to_json(make_product().with_id(4))
        assert body["price"] == "19.99"
        assert body["id"] == 4


class TestCatalogClient:
    """Tests for CatalogClient."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, client: CatalogClient) -> None:
        created = await client.create_product(make_product())

        assert created.id == 1
        assert created.price == Decimal("19.99")
        assert await client.get_product(created.id) == created

    @pytest.mark.asyncio
    async def test_list_products(self, client: CatalogClient) -> None:
        await client.create_product(make_product("A"))
        await client.create_product(make_product("B"))

        products = await client.list_products()
        assert [p.name for p in products] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_update_product(self, client: CatalogClient) -> None:
        created = await client.create_product(make_product())

        updated = await client.update_product(
            created.id, make_product("Red Shirt", "21.50").with_id(created.id)
        )

        assert updated.name == "Red Shirt"
        assert updated.price == Decimal("21.5")

    @pytest.mark.asyncio
    async def test_delete_product(self, client: CatalogClient) -> None:
        created = await client.create_product(make_product())

        message = await client.delete_product(created.id)

        assert message == "Product deleted successfully"
        assert await client.list_products() == []

    @pytest.mark.asyncio
    async def test_invalid_input_is_mapped(self, client: CatalogClient) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            await client.create_product(make_product(name=" "))

        assert exc_info.value.message == "Invalid product data"
        assert exc_info.value.details["errors"] == ["name must not be blank"]

    @pytest.mark.asyncio
    async def test_not_found_is_mapped(self, client: CatalogClient) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await client.get_product(99)

        assert exc_info.value.message == "Product not found"

    @pytest.mark.asyncio
    async def test_server_error_is_client_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                500, json={"kind": "internal_error", "message": "An internal error occurred"}
            )

        async with CatalogClient(
            "http://testserver", transport=httpx.MockTransport(handler)
        ) as failing:
            with pytest.raises(CatalogClientError) as exc_info:
                await failing.list_products()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_non_object_error_body_is_client_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, json=["bad gateway"])

        async with CatalogClient(
            "http://testserver", transport=httpx.MockTransport(handler)
        ) as failing:
            with pytest.raises(CatalogClientError) as exc_info:
                await failing.get_product(1)

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_large_price_round_trip(
        self, client: CatalogClient, store: InMemoryProductStore
    ) -> None:
        price = Decimal("1234567890123456.78")
        created = await client.create_product(make_product(price=str(price)))

        fetched = await client.get_product(created.id)
        assert created.price == price
        assert fetched.price == price

        await client.update_product(created.id, fetched.with_id(created.id))
        assert (await store.get(created.id)).price == price

    @pytest.mark.asyncio
    async def test_transport_failure_is_client_error(self) -> None:
        catalog_client = CatalogClient("http://testserver")
        http = await catalog_client._get_client()

        with patch.object(
            http, "request", AsyncMock(side_effect=httpx.ConnectError("refused"))
        ):
            with pytest.raises(CatalogClientError, match="Request failed"):
                await catalog_client.list_products()

        await catalog_client.close()


class TestBrowse:
    """Tests for client-side browsing."""

    @pytest.mark.asyncio
    async def test_browse_filters_sorts_and_pages(self, client: CatalogClient) -> None:
        for name, price in [
            ("Blue Shirt", "30"),
            ("Red Shirt", "10"),
            ("Green Pants", "5"),
            ("White Shirt", "20"),
        ]:
            await client.create_product(make_product(name, price))

        page = await client.browse(
            ViewParams(search="shirt", sort=SortKey.PRICE_ASC, page=1, page_size=2)
        )

        assert [p.name for p in page.items] == ["Red Shirt", "White Shirt"]
        assert page.total_items == 3
        assert page.total_pages == 2
        assert page.has_next

    @pytest.mark.asyncio
    async def test_browse_empty_catalog(self, client: CatalogClient) -> None:
        page = await client.browse(ViewParams())

        assert page.items == []
        assert page.total_pages == 0
        assert not page.shows_controls
