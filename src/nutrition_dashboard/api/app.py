"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_dashboard.api.cycles import router as cycles_router
from nutrition_dashboard.api.dashboard import router as dashboard_router
from nutrition_dashboard.api.entries import router as entries_router
from nutrition_dashboard.app_logging import configure_logging
from nutrition_dashboard.containers import AppContainer
from nutrition_dashboard.domain.errors import NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrition Dashboard")
    app.state.container = container

    app.include_router(dashboard_router)
    app.include_router(entries_router)
    app.include_router(cycles_router)

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Nutrition dashboard API ready: environment=%s",
        container.settings.environment,
    )
    return app
