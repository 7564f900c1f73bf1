"""Litestar application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from litestar import Litestar
from litestar.datastructures import State
from litestar.logging import LoggingConfig
from litestar.openapi import OpenAPIConfig
from litestar.openapi.spec import Contact, Server

from photofeed.api.dependencies import build_security, dependencies
from photofeed.api.routes import (
    AuthController,
    PostController,
    UserController,
    health,
    photofeed_error_handler,
)
from photofeed.core.config import Settings, get_settings
from photofeed.core.exceptions import PhotofeedError
from photofeed.db import DatabaseManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def database_lifespan(app: Litestar) -> AsyncGenerator[None, None]:
    """Open the connection pool on startup and dispose of it on shutdown."""
    settings: Settings = app.state.settings

    db_manager = DatabaseManager.from_settings(settings)
    app.state.db_manager = db_manager
    logger.info("Database connection pool initialized")

    try:
        yield
    finally:
        logger.info("Shutting down Photofeed API service")
        await db_manager.close()
        app.state.db_manager = None
        logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> Litestar:
    # sourcery skip: inline-immediately-returned-variable
    """Create and configure Litestar application.

    Security services are built here, before anything is served, so a
    missing production secret stops the process before it serves traffic.

    Args:
        settings: Application settings (defaults to environment).

    Returns:
        Configured Litestar application instance.
    """
    settings = settings or get_settings()
    security = build_security(settings)

    # Logging configuration
    logging_config = LoggingConfig(
        root={
            "level": "DEBUG" if settings.debug else "INFO",
            "handlers": ["console"],
        },
        formatters={
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        handlers={
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        loggers={
            "photofeed": {
                "level": "DEBUG" if settings.debug else "INFO",
                "propagate": True,
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
                "propagate": False,
            },
        },
    )

    # OpenAPI documentation configuration
    openapi_config = OpenAPIConfig(
        title="Photofeed API",
        version="0.1.0",
        description="Photofeed REST API for accounts and posts",
        contact=Contact(name="API Support"),
        servers=[
            Server(
                url=f"http://{settings.api_host}:{settings.api_port}",
                description="Local development server",
            ),
        ],
        path="/docs",
    )

    app = Litestar(
        route_handlers=[
            health,
            AuthController,
            UserController,
            PostController,
        ],
        dependencies=dependencies,
        exception_handlers={PhotofeedError: photofeed_error_handler},
        lifespan=[database_lifespan],
        state=State(
            {
                "settings": settings,
                "jwt_service": security.jwt_service,
                "password_service": security.password_service,
                "cookie_config": security.cookie_config,
            }
        ),
        logging_config=logging_config,
        openapi_config=openapi_config,
        debug=settings.debug,
    )

    return app
