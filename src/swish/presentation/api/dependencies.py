"""FastAPI dependency injection for the Swish API.

Provides dependencies for:
- Database sessions
- Authentication (caller identity from the bearer token)
- Repository factory for the feed use cases
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from swish.application.context import UserContext
from swish.infrastructure.persistence.sqlalchemy.models import Base
from swish.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from swish.presentation.api.config import get_api_settings
from swish_auth import InvalidTokenError, JWTService, MissingTokenError
from swish_config.settings import Settings
from swish_identity import (
    AuthenticationService,
    PasswordHashingService,
    PhotoStorage,
)
from swish_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from swish_identity.infrastructure.storage import DisabledPhotoStorage, S3PhotoStorage

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton per URL)
# -----------------------------------------------------------------------------


@lru_cache()
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a URL.

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    if database_url.startswith("sqlite"):
        db_path = database_url.split("///")[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache()
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker for a URL.

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    settings: SettingsDep,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_expire_days=settings.jwt_token_expire_days,
    )


@lru_cache()
def _password_service(rounds: int) -> PasswordHashingService:
    return PasswordHashingService(rounds=rounds)


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service (shared, it caches its dummy hash)."""
    return _password_service(settings.password_hash_rounds)


def build_photo_storage(settings: Settings) -> PhotoStorage:
    """Create the photo storage backend selected by the settings."""
    if not settings.photo_storage_enabled:
        logger.info("Profile photo storage disabled")
        return DisabledPhotoStorage(max_bytes=settings.photo_max_bytes)

    secret = settings.photo_storage_secret_access_key
    logger.info("Profile photos stored in bucket %s", settings.photo_storage_bucket)
    return S3PhotoStorage(
        bucket=settings.photo_storage_bucket,
        region=settings.photo_storage_region,
        endpoint_url=settings.photo_storage_endpoint_url,
        access_key_id=settings.photo_storage_access_key_id,
        secret_access_key=secret.get_secret_value() if secret else None,
        public_base_url=settings.photo_storage_public_base_url,
        max_bytes=settings.photo_max_bytes,
    )


def get_photo_storage(request: Request) -> PhotoStorage:
    """Get the photo storage created with the application."""
    return request.app.state.photo_storage


async def get_authentication_service(
    session: DBSession,
    settings: SettingsDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    photo_storage: PhotoStorage = Depends(get_photo_storage),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, login and user lookup.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        admin_access_code=settings.admin_access_code.get_secret_value(),
        campus=settings.campus_name,
        photo_storage=photo_storage,
        allowed_email_domains=settings.allowed_email_domains,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Caller identity (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_user_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    FastAPI dependency resolving the caller from the bearer token.

    Runs before any repository is touched, so a rejected request never
    reaches the database.

    Raises
    ------
    MissingTokenError
        If no bearer token was sent
    InvalidTokenError
        If the token is malformed, tampered with or expired
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise

    return UserContext(user_id=payload.user_id)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    user_context: CurrentUserContext,
    session: DBSession,
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current request.

    The factory creates repositories bound to the request's session.
    """
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
