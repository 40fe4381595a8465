"""Product API endpoints.

CRUD over the product catalog. Domain errors raised by the catalog
service are turned into error responses by the handlers in main.
"""

from collections.abc import AsyncGenerator
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status

from catalog_api.api.responses import DecimalJSONResponse
from catalog_api.api.schemas import (
    ErrorResponse,
    MessageResponse,
    ProductRequest,
    ProductSchema,
)
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.store import ProductStore, get_product_store
from catalog_api.domain.product import Product
from catalog_api.infrastructure.config import settings

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    default_response_class=DecimalJSONResponse,
)


# ============================================================================
# Dependencies
# ============================================================================


async def get_store() -> AsyncGenerator[ProductStore, None]:
    """Get the product store for the configured backend."""
    if settings.store_backend == "memory":
        yield get_product_store()
        return

    from catalog_api.catalog.repository import ProductRepository
    from catalog_api.infrastructure.database import async_session_factory

    async with async_session_factory() as session:
        yield ProductRepository(session)


def get_service(
    store: Annotated[ProductStore, Depends(get_store)],
) -> CatalogService:
    """Get catalog service bound to the request's store."""
    return CatalogService(store)


def product_content(product: Product) -> dict[str, Any]:
    """Response body for a product, with the price kept as a Decimal."""
    return ProductSchema.from_domain(product).model_dump()


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductSchema],
    summary="List products",
    description="Get every product in the catalog.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
) -> DecimalJSONResponse:
    """List all products.

    Returns:
        All products, in store order.
    """
    products = await service.list_products()
    return DecimalJSONResponse([product_content(p) for p in products])


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_service)],
) -> DecimalJSONResponse:
    """Get a product by ID.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        Product details.
    """
    product = await service.get_product(product_id)
    return DecimalJSONResponse(product_content(product))


@router.post(
    "",
    response_model=ProductSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
    description="Create a product. Any id in the body is ignored.",
)
async def create_product(
    body: ProductRequest,
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> DecimalJSONResponse:
    """Create a product.

    Args:
        body: Product fields.
        request: Incoming request, used to build the Location header.
        service: Catalog service.

    Returns:
        The created product with its assigned id.
    """
    product = await service.create_product(body.to_domain())
    location = request.url_for("get_product", product_id=product.id)
    return DecimalJSONResponse(
        product_content(product),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product",
    description="Replace every field of a product. The body id must match the path.",
)
async def update_product(
    product_id: int,
    body: ProductRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> DecimalJSONResponse:
    """Update a product.

    Args:
        product_id: Product identifier.
        body: New product fields.
        service: Catalog service.

    Returns:
        The updated product.
    """
    product = await service.update_product(product_id, body.to_domain())
    return DecimalJSONResponse(product_content(product))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: int,
    service: Annotated[CatalogService, Depends(get_service)],
) -> MessageResponse:
    """Delete a product.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        Deletion acknowledgement.
    """
    result = await service.delete_product(product_id)
    return MessageResponse(message=result.message)
