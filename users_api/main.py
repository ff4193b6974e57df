"""
User Registry API - Main Application
====================================

FastAPI application entry point.

This module:
- Creates the FastAPI application
- Configures CORS
- Includes API routes
- Sets up logging
- Provides startup/shutdown hooks

RUNNING THE APP:
    Development: uvicorn users_api.main:app --reload
    Production:  uvicorn users_api.main:app --host 0.0.0.0 --port 8000

API DOCUMENTATION:
    - Swagger UI: http://localhost:8000/docs
    - ReDoc: http://localhost:8000/redoc
    - OpenAPI JSON: http://localhost:8000/openapi.json
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from users_api.api.routes import router
from users_api.config import Settings, get_settings
from users_api import __version__

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_console_handler: Optional[logging.Handler] = None


# =============================================================================
# Logging Setup
# =============================================================================

def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure logging for the application.

    Installs a single stdout handler on the root logger; calling this again
    only updates the level.
    """
    global _console_handler
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(
            logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        root_logger.addHandler(_console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)


# =============================================================================
# Application Lifecycle
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Users are kept in memory only, so there is nothing to open or flush;
    startup configures logging and shutdown just reports.
    """
    settings = app.state.settings
    setup_logging(settings)
    logger = logging.getLogger(__name__)

    logger.info(f"Starting {settings.app_name} v{__version__}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Routes mounted at: {settings.api_prefix or '/'}")

    yield

    logger.info(f"Shutting down {settings.app_name}")


# =============================================================================
# FastAPI Application
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings (defaults to the cached environment settings)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "List and create users. Request bodies are validated against "
            "the schemas below and users are kept in memory until restart."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "users", "description": "List and create users"},
            {"name": "health", "description": "API health check"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect root to API documentation."""
        return RedirectResponse(url="/docs")

    return app


# Create the application instance
app = create_app()


# =============================================================================
# Development Server
# =============================================================================

if __name__ == "__main__":
    from users_api.__main__ import main

    main()
