"""FastAPI application for the Evermiss deep-link service.

Run:
    uvicorn api.deeplink.app:app --reload --port 8000
"""

import sys

from fastapi import FastAPI
from loguru import logger

from api.deeplink.middleware import DeepLinkMiddleware
from api.deeplink.routes import catchall_router, router as wellknown_router
from lib.deeplink.config import load_settings


def setup_logging(level: str = "INFO"):
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level,
    )


def create_app() -> FastAPI:
    settings = load_settings()
    setup_logging(settings.log_level)

    # No docs routes: every unknown path must answer 404
    app = FastAPI(
        title="Evermiss Deep-Link Service",
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(DeepLinkMiddleware)

    # /.well-known files
    app.include_router(wellknown_router)

    # Catch-all: MUST be last so it doesn't shadow the well-known routes.
    app.include_router(catchall_router)

    logger.info(f"Deep-link service starting: environment={settings.environment} domain={settings.domain}")
    return app


app = create_app()
