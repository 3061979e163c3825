"""Root pytest configuration.

Test Structure:
    tests/
    ├── swish/                 # Feed domain and HTTP API tests
    │   ├── unit/              # Fast, isolated tests
    │   └── integration/       # Tests against a throwaway SQLite database
    ├── swish_identity/        # Identity tests (users, registration, login)
    │   ├── unit/
    │   └── integration/
    ├── swish_auth/            # Token tests
    ├── swish_config/          # Settings tests
    └── shared/                # Shared fixtures and utilities

Integration tests use aiosqlite on a temporary file, so no database server
is needed to run the full suite.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from swish_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

# Required settings, only used when no env file provides them
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("ADMIN_ACCESS_CODE", "test-admin-code")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
