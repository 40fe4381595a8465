"""Catalog API Client.

Thin HTTP client for the Catalog REST API. Error bodies are mapped
back onto the domain error taxonomy, and ``browse`` runs the query
pipeline over the fetched collection, paginating on the client side.
"""

from decimal import Decimal
from typing import Any

import httpx
import structlog

from catalog_api.catalog.query import ProductPage, ViewParams, run_query
from catalog_api.domain.exceptions import InvalidInputError, NotFoundError
from catalog_api.domain.product import Product

logger = structlog.get_logger()


class CatalogClientError(Exception):
    """Raised for transport failures and unexpected API responses."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def product_from_json(data: dict[str, Any]) -> Product:
    """Build a Product from an API response body."""
    return Product(
        id=data["id"],
        name=data["name"],
        description=data["description"],
        price=Decimal(str(data["price"])),
        image=data.get("image"),
    )


def product_to_json(product: Product) -> dict[str, Any]:
    """Serialize a Product into an API request body."""
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": str(product.price),
        "image": product.image,
    }


class CatalogClient:
    """HTTP client for the Catalog REST API.

    Example usage:
        async with CatalogClient("http://localhost:8000") as client:
            page = await client.browse(ViewParams(search="shirt"))
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Catalog API base URL.
            timeout: Request timeout in seconds.
            transport: Optional transport override (e.g. ASGI for tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method.
            path: API endpoint path.
            json: Request body as JSON.

        Returns:
            Decoded JSON response body.

        Raises:
            InvalidInputError: On HTTP 400.
            NotFoundError: On HTTP 404.
            CatalogClientError: On transport failure or any other error status.
        """
        client = await self._get_client()

        logger.debug("Making API request", method=method, path=path)
        try:
            response = await client.request(method=method, url=path, json=json)
        except httpx.TimeoutException as e:
            logger.error("API request timeout", path=path, error=str(e))
            raise CatalogClientError(f"Request timed out: {path}") from e
        except httpx.RequestError as e:
            logger.error("API request failed", path=path, error=str(e))
            raise CatalogClientError(f"Request failed: {e}") from e

        if response.status_code < 400:
            # Decimal keeps every digit of the price
            return response.json(parse_float=Decimal)

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("message") or response.reason_phrase
        details = body.get("details") or {}

        if response.status_code == 400:
            raise InvalidInputError(message, details)
        if response.status_code == 404:
            raise NotFoundError(message, details)
        raise CatalogClientError(message, status_code=response.status_code)

    # =========================================================================
    # Product Endpoints
    # =========================================================================

    async def list_products(self) -> list[Product]:
        """Fetch every product."""
        data = await self._request("GET", "/products")
        return [product_from_json(item) for item in data]

    async def get_product(self, product_id: int) -> Product:
        """Fetch one product by id."""
        data = await self._request("GET", f"/products/{product_id}")
        return product_from_json(data)

    async def create_product(self, product: Product) -> Product:
        """Create a product; the server assigns its id."""
        data = await self._request("POST", "/products", json=product_to_json(product))
        return product_from_json(data)

    async def update_product(self, product_id: int, product: Product) -> Product:
        """Replace every field of a product."""
        data = await self._request(
            "PUT", f"/products/{product_id}", json=product_to_json(product)
        )
        return product_from_json(data)

    async def delete_product(self, product_id: int) -> str:
        """Delete a product.

        Returns:
            The server's acknowledgement message.
        """
        data = await self._request("DELETE", f"/products/{product_id}")
        return data["message"]

    # =========================================================================
    # Browsing
    # =========================================================================

    async def browse(self, params: ViewParams) -> ProductPage:
        """Fetch the catalog and select one page of it locally.

        Args:
            params: Search, sort and paging parameters.

        Returns:
            The page of products to display.
        """
        products = await self.list_products()
        return run_query(products, params)
