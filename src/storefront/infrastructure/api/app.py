"""Storefront FastAPI application.

Maps domain errors onto HTTP status codes:

- ``EntityNotFoundError``                 -> 404
- ``ValidationError`` and malformed input -> 400
- ``StorageError`` and anything else      -> 500

Usage:
    uvicorn storefront.infrastructure.api.app:app --port 3000
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from storefront.infrastructure.api.routes import (
    category_router,
    order_router,
    product_router,
    user_router,
)
from storefront.infrastructure.api.schemas import ErrorResponse
from storefront.infrastructure.logging import configure_logging

logger = structlog.get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error(404, str(exc))


async def _invalid(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, str(exc))


async def _malformed(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return _error(400, f"Invalid request: {details}")


async def _storage_failure(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure", path=request.url.path, exc_info=exc)
    return _error(500, str(exc))


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", path=request.url.path, exc_info=exc)
    return _error(500, str(exc))


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Storefront API",
        description="Users, categories, products and orders",
    )

    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid)
    app.add_exception_handler(RequestValidationError, _malformed)
    app.add_exception_handler(StorageError, _storage_failure)
    app.add_exception_handler(Exception, _unexpected)

    app.include_router(user_router)
    app.include_router(category_router)
    app.include_router(product_router)
    app.include_router(order_router)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
