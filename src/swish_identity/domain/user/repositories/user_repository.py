"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union
from uuid import UUID

from swish_identity.domain.user.aggregates.user import User
from swish_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        """Find several users at once, keyed by ID. Unknown IDs are omitted."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""
