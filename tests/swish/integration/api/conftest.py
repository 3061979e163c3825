"""Pytest fixtures for API integration tests.

Each test gets its own SQLite database file. The application is built with
``create_app(settings=...)`` and its session dependency is pointed at that
database; photo uploads go to an in-memory store.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from swish.infrastructure.persistence.sqlalchemy.models.base import Base
from swish.presentation.api.app import API_PREFIX, create_app
from swish.presentation.api.dependencies import get_db_session, get_photo_storage
from swish_config.settings import Settings
from tests.shared.fixtures.api import (
    TEST_ADMIN_CODE,
    InMemoryPhotoStorage,
    bearer,
    register,
)
from tests.shared.fixtures.database import register_models


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        # Required security settings
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        admin_access_code=SecretStr(TEST_ADMIN_CODE),
        database_dsn=database_url,
        # API settings
        api_host="127.0.0.1",
        api_port=5000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        # Cheap hashing keeps the suite fast
        password_hash_rounds=4,
        photo_max_bytes=1024,
        registration_allowed_email_domains="",
        log_level="WARNING",
    )


@pytest.fixture
def photo_storage(api_settings) -> InMemoryPhotoStorage:
    return InMemoryPhotoStorage(max_bytes=api_settings.photo_max_bytes)


def _setup_test_database(async_engine) -> None:
    """Create all tables in a fresh event loop (the TestClient runs its own)."""
    register_models()

    async def _setup():
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(_setup())
    finally:
        loop.close()


@pytest.fixture
def test_client(api_settings, async_engine, photo_storage):
    """Create a test client bound to the per-test SQLite database."""
    _setup_test_database(async_engine)

    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_photo_storage] = lambda: photo_storage

    yield TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Registration form for the default test user."""
    return {
        "name": "Asha Kulkarni",
        "email": "asha@sigce.edu",
        "password": "SecurePassword123!",
        "role": "student",
        "student_id": "S-2024-017",
        "department": "Computer Science",
        "year": "2",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data, api_prefix) -> dict:
    """Register the default user and return the register response body."""
    return register(test_client, api_prefix, **registered_user_data)


@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Get auth headers for the registered user."""
    return bearer(registered_user["token"])


@pytest.fixture
def other_user(test_client, api_prefix) -> dict:
    """A second, faculty user."""
    return register(
        test_client,
        api_prefix,
        name="Ravi Deshpande",
        email="ravi@sigce.edu",
        role="faculty",
        employee_id="E-311",
        faculty_department="Mechanical",
        designation="Assistant Professor",
    )


@pytest.fixture
def other_headers(other_user) -> dict:
    return bearer(other_user["token"])
