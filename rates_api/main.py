"""Rates API — FastAPI application entry point.

Invariants:
    - Registration order: defined routes → error handlers → not-found catch-all
    - Global error handlers map every failure to the {status, message} envelope
    - CORS configured from settings (not hardcoded)
    - Upstream HTTP client created on startup and closed on shutdown (lifespan)
    - The bound port is logged by the process entry point (__main__), once sockets exist

Design Decisions:
    - Lifespan over @app.on_event: owns the rates client lifecycle
    - create_app() factory so tests can build apps with their own settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rates_api.api.error_handlers import register_error_handlers
from rates_api.api.routes import profile, rates
from rates_api.api.routes.not_found import register_not_found
from rates_api.config import Settings, get_settings
from rates_api.infrastructure.observability import setup_logging
from rates_api.infrastructure.rates_client import RatesClient

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        app.state.rates_client = RatesClient(
            settings.rates_api_url, access_key=settings.rates_api_key,
        )
        logger.info(
            "Rates API started",
            extra={"upstream_url": settings.rates_api_url},
        )
        try:
            yield
        finally:
            await app.state.rates_client.aclose()
            app.state.rates_client = None
            logger.info("Rates API shutting down")

    app = FastAPI(title="Rates API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration, catch-all strictly last
    app.include_router(profile.router)
    app.include_router(rates.router)
    register_error_handlers(app)
    register_not_found(app)

    return app


app = create_app()
