"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catlog.api.eliminations import router as eliminations_router
from catlog.api.foods import router as foods_router
from catlog.api.meals import router as meals_router
from catlog.api.summary import router as summary_router
from catlog.api.weights import router as weights_router
from catlog.app_logging import configure_logging
from catlog.containers import AppContainer
from catlog.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="catlog")
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(summary_router)
    app.include_router(weights_router)
    app.include_router(eliminations_router)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(ConflictError)
    async def conflict(_request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": exc.message})

    @app.exception_handler(StorageError)
    async def storage_failure(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage failure",
            extra={"path": request.url.path, "error": exc.message},
        )
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
