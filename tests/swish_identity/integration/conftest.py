"""Fixtures for swish_identity integration tests (SQLite per test)."""

from tests.shared.fixtures.database import async_engine, database_url, db_session

__all__ = ["async_engine", "database_url", "db_session"]
