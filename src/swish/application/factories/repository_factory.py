"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from swish.domain.feed import PostRepository
from swish_identity.domain.user.repositories import UserRepository

if TYPE_CHECKING:
    from swish.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def user_context(self) -> UserContext:
        """Get the authenticated caller."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Use this for commit/rollback at the presentation layer.
        """
        ...

    def post_repository(self) -> PostRepository:
        """Get post repository."""
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...
