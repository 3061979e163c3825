"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from swish.infrastructure.persistence.sqlalchemy.repositories.post_repository import (
    PostRepositorySQLAlchemy,
)
from swish_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from swish.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._post_repo: PostRepositorySQLAlchemy | None = None
        self._user_repo: UserRepositorySQLAlchemy | None = None

    @property
    def user_context(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def post_repository(self) -> PostRepositorySQLAlchemy:
        if self._post_repo is None:
            self._post_repo = PostRepositorySQLAlchemy(self._session)
        return self._post_repo

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo
