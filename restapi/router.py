"""Application configuration and router setup."""

import fastapi
from fastapi.middleware import cors

from components.core import init_db
from components.core.config import get_settings
from components.core.logging import setup_logging
from restapi.endpoints import health_check, ledger


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = fastapi.FastAPI(
        title="CrediKhaata",
        description="Customer credit and payment ledger for shopkeepers",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=init_db.lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health_check.router)
    app.include_router(ledger.router)

    return app
