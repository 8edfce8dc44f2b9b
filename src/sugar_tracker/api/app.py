"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sugar_tracker.api.session import router as session_router
from sugar_tracker.api.tracker import router as tracker_router
from sugar_tracker.app_logging import configure_logging
from sugar_tracker.containers import AppContainer
from sugar_tracker.domain.errors import InvalidInputError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await app.state.container.load()
        logger.info(
            "Loaded tracker state (storage=%s)",
            app.state.container.settings.storage_backend,
        )
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(session_router)
    app.include_router(tracker_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
