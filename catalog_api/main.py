"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.domain.exceptions import DomainError, InvalidInputError, NotFoundError
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.logging_setup import configure_logging

configure_logging(settings.log_level, json=settings.log_json)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        store_backend=settings.store_backend,
        debug=settings.debug,
    )

    if settings.store_backend == "database":
        from catalog_api.infrastructure.database import create_tables, engine

        if settings.create_tables:
            await create_tables()
            logger.info("Database tables ready")

        yield

        await engine.dispose()
    else:
        yield

    logger.info("Shutting down Catalog API")


app = FastAPI(
    title="Catalog API",
    description="Product catalog CRUD service",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def error_response(
    request: Request,
    status_code: int,
    kind: str,
    message: str,
    details: dict | None = None,
) -> JSONResponse:
    """Build an error response in the standard format."""
    return JSONResponse(
        status_code=status_code,
        content={
            "kind": kind,
            "message": message,
            "details": details or {},
            "request_id": getattr(request.state, "request_id", None),
        },
    )


def status_for(exc: DomainError) -> int:
    """Map a domain error onto an HTTP status code.

    Kinds outside the error taxonomy are server faults.
    """
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, InvalidInputError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors raised by the catalog service."""
    return error_response(
        request,
        status_for(exc),
        exc.kind,
        exc.message,
        jsonable_encoder(exc.details),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and path parameters as invalid input."""
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        InvalidInputError.kind,
        "Invalid request",
        {"errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    kind = "not_found" if exc.status_code == status.HTTP_404_NOT_FOUND else "http_error"
    return error_response(request, exc.status_code, kind, str(exc.detail))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An internal error occurred",
    )
