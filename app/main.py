"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting, CORS, body size)
- Logging configuration
- The storage adapter selected by settings

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.rewards import ProgressTracker
from app.interfaces.catalog.dependencies import build_product_repository
from app.interfaces.catalog.router import router as catalog_router
from app.interfaces.health import router as health_router
from app.interfaces.stats import router as stats_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)
from app.shared.security.request_size import RequestSizeLimitMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: announce the storage variant on startup."""
    logger.info(
        "%s %s started (storage=%s)",
        app.state.settings.project_name,
        app.state.settings.version,
        app.state.product_repository.backend_name,
    )
    yield
    logger.info("%s stopped", app.state.settings.project_name)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded settings.
        repository: Storage adapter to inject. Defaults to the one selected
            by ``settings.storage_backend``.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        ConfigurationError: If the Airtable backend lacks credentials.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.product_repository = repository or build_product_repository(settings)
    app.state.progress = ProgressTracker()

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(
        RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app, debug=settings.debug)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(stats_router, prefix="/api/v1")

    return app


app = create_app()
