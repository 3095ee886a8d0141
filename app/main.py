# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.exceptions import register_exception_handlers
from app.routers import health, users
from core.models import APIResponse
from core.services import UserMirror, UserStore

logger = logging.getLogger(__name__)

DEVELOPMENT_LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] %(message)s"
)
PRODUCTION_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# Logging
# =============================================================================

def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from settings.

    Production mode never logs below INFO and drops source locations
    from the format.
    """
    level = settings.log_level_value
    log_format = DEVELOPMENT_LOG_FORMAT

    if settings.is_production:
        level = max(level, logging.INFO)
        log_format = PRODUCTION_LOG_FORMAT

    logging.basicConfig(level=level, format=log_format)
    logging.getLogger().setLevel(level)


# =============================================================================
# Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Only logs: the store and mirror are created with the app, so they
    exist even when the lifespan doesn't run.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME} on port {settings.PORT} (env: {settings.APP_ENV})")
    logger.info(f"Mirroring users to: {settings.DATA_DIR}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME} ({len(app.state.user_store)} users in memory)")


# =============================================================================
# Middleware
# =============================================================================

async def log_requests(request: Request, call_next):
    """Log one line per request with status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    return response


# =============================================================================
# Application Factory
# =============================================================================

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build a FastAPI app with its own store, mirror and settings.

    Args:
        settings: Settings to use (defaults to the cached environment settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="In-memory user CRUD service with a health check.",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    # Per-app state (no module-level globals)
    app.state.settings = settings
    app.state.user_store = UserStore()
    app.state.user_mirror = UserMirror(settings.DATA_DIR)
    app.state.started_at = time.monotonic()

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    app.middleware("http")(log_requests)

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    register_exception_handlers(app)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    # Health check endpoints (no prefix: /health)
    app.include_router(
        health.router,
        tags=["Health"]
    )

    # User CRUD endpoints
    app.include_router(
        users.router,
        prefix="/api/v1/users",
        tags=["Users"]
    )

    @app.get("/", tags=["Root"], response_model=APIResponse, response_model_exclude_none=True)
    async def root():
        """
        Root endpoint - returns API info.
        """
        return APIResponse.success(
            f"{settings.APP_NAME} is running",
            data={
                "name": settings.APP_NAME,
                "version": settings.APP_VERSION,
                "docs": "/docs",
                "health": "/health",
            },
        )

    # Static files (if any)
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.debug(f"Static directory not found, /static disabled: {static_dir}")

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    run()
