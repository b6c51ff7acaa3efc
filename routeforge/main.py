"""Application factory and server entry point.

``create_app`` builds the FastAPI application with the ambient middleware
stack and error boundary. When registration options are given, route
modules are discovered and mounted during lifespan startup, so a broken
route directory stops the process before it accepts traffic.

Usage:
    from routeforge import RegistrationOptions, create_app, run

    app = create_app(
        registration=RegistrationOptions(prefix="/api/v1", routes_dir="app/routes")
    )

    if __name__ == "__main__":
        run(app)
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import replace

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routeforge.core.config import Settings, get_settings
from routeforge.core.container import get_logger
from routeforge.presentation.errors import register_exception_handlers
from routeforge.presentation.middleware import (
    ErrorBoundaryMiddleware,
    SecurityHeadersMiddleware,
    TraceMiddleware,
)
from routeforge.presentation.routing import RegistrationOptions, register_routes


def create_app(
    *,
    registration: RegistrationOptions | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        registration: Route registration options. ``None`` skips discovery
            (definitions can still be mounted with register_route_definitions).
        settings: Settings to use (default: process settings).

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    logger = get_logger()

    if registration is not None and registration.routes_dir is None:
        registration = replace(registration, routes_dir=settings.routes_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Register routes on startup.

        Yields:
            None during application lifetime.
        """
        if registration is not None:
            await register_routes(app, registration, logger=logger)

        logger.info(
            "application_started",
            app_name=settings.app_name,
            environment=settings.environment.value,
            routes=len(app.routes),
        )
        yield
        logger.info("application_stopped", app_name=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Last added runs first: CORS → trace/access log → security headers →
    # error boundary
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(TraceMiddleware, logger=logger)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    return app


def run(app: FastAPI, *, settings: Settings | None = None) -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    settings = settings or get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
