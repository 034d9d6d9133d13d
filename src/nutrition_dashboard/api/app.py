"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutrition_dashboard.api.dashboard import router as dashboard_router
from nutrition_dashboard.api.webhooks import relay_http_exception_handler
from nutrition_dashboard.api.webhooks import router as webhooks_router
from nutrition_dashboard.app_logging import configure_logging
from nutrition_dashboard.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    if not container.webhook_relay.webhook_url:
        logger.warning("N8N_ONBOARDING_WEBHOOK_URL is not set; relay will fail")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(dashboard_router)
    app.include_router(webhooks_router)
    app.add_exception_handler(StarletteHTTPException, relay_http_exception_handler)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
