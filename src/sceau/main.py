"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from sceau import __version__
from sceau.config.settings import Settings, get_settings, override_settings
from sceau.di import initialize_container, shutdown_container
from sceau.domain.exceptions import SceauException
from sceau.infrastructure.monitoring import get_logger, setup_logging
from sceau.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    sceau_exception_handler,
)
from sceau.presentation.api.routes import auth, courses, health, profiles


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    else:
        override_settings(settings)

    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    logger = get_logger(__name__)

    logger.info(f"Creating Sceau application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Sceau application...")
        await initialize_container()
        logger.info(
            f"Sceau application started "
            f"(default scheme={settings.DEFAULT_WALLET_SCHEME.value}, "
            f"strict solana={settings.SOLANA_STRICT_VERIFICATION})"
        )

        yield

        logger.info("Shutting down Sceau application...")
        await shutdown_container()
        logger.info("Sceau application shutdown complete")

    app = FastAPI(
        title="Sceau API",
        description="Wallet-signature sessions for the Tutorial Platform",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Middleware chain (last added runs first)
    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SceauException, sceau_exception_handler)

    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(courses.router, prefix="/api")
    app.include_router(profiles.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "Sceau",
            "status": "running",
            "version": __version__,
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Sceau application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance.

    For uvicorn: uvicorn sceau.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "sceau.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
    )


if __name__ == "__main__":
    main()
