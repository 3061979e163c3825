"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All feed and auth endpoints live under the /api prefix. The health check
and the info endpoint stay at the root.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swish.presentation.api.dependencies import (
    build_photo_storage,
    create_tables,
    get_engine,
)
from swish.presentation.api.exception_handlers import setup_exception_handlers
from swish.presentation.api.routers import auth_router, posts_router
from swish.presentation.api.schemas.common import ApiInfoResponse, HealthResponse
from swish_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Accounts and sessions.

**Registration:**
- Students, faculty and admins (admins need the campus access code)
- Optional profile photo upload

**Sessions:**
- Bearer tokens valid for 7 days
- Passwords hashed with bcrypt
""",
    },
    {
        "name": "Posts",
        "description": """The campus feed.

- Newest posts first, each with its author's public profile
- Liking twice removes the like again
- Comments keep the order they were written in
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for swish modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("swish", "swish_identity", "swish_auth"):
        logging.getLogger(name).setLevel(log_level)

    for name in ("sqlalchemy.engine", "aiosqlite", "botocore", "boto3", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = get_engine(settings.database_url)
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the router holding every /api endpoint."""
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(posts_router, prefix="/posts", tags=["Posts"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Campus social network: profiles, posts, likes and comments.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.photo_storage = build_photo_storage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> ApiInfoResponse:
        """API root endpoint with version and campus information."""
        return ApiInfoResponse(
            message=f"{settings.app_name} API is running",
            name=f"{settings.app_name} API",
            version=API_VERSION,
            campus=settings.campus_name,
            api_base=API_PREFIX,
        )

    return app
