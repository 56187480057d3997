"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from smart_pantry.api.builder import router as builder_router
from smart_pantry.api.collections import router as collections_router
from smart_pantry.api.schemas import StorageImageRequest
from smart_pantry.app_logging import configure_logging
from smart_pantry.containers import AppContainer
from smart_pantry.domain.errors import (
    ProductLookupError,
    ProductNotFoundError,
    ValidationRejectedError,
)
from smart_pantry.services.serialization import product_to_record


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(builder_router)
    app.include_router(collections_router)

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found(
        request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "barcode": exc.barcode},
        )

    @app.exception_handler(ProductLookupError)
    async def product_lookup_failed(
        request: Request, exc: ProductLookupError
    ) -> JSONResponse:
        logger.warning("Product lookup failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc) or "Something went wrong."},
        )

    @app.exception_handler(ValidationRejectedError)
    async def validation_rejected(
        request: Request, exc: ValidationRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/products/{barcode}")
    async def product_detail(barcode: str, request: Request) -> dict[str, object]:
        """Look up a barcode and enrich the product."""
        state_container: AppContainer = request.app.state.container
        product = await state_container.product_service.lookup(barcode)
        enrichment = await state_container.enrichment_service.enrich(product)
        return {
            "product": product_to_record(product),
            "enrichment": enrichment.model_dump(by_alias=True),
            "alreadySaved": state_container.recipe_service.is_idea_saved(
                product.barcode, enrichment.recipe_idea
            ),
        }

    @app.post("/storage-images")
    async def storage_image(
        body: StorageImageRequest, request: Request
    ) -> dict[str, str | None]:
        """Generate an image showing how to store a product."""
        state_container: AppContainer = request.app.state.container
        image = await state_container.enrichment_service.storage_image(
            body.product_name, body.storage_tip
        )
        return {"imageDataUrl": image}

    return app
