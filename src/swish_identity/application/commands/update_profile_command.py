from typing import Any, Iterable, Mapping, Optional, Union
from uuid import UUID

from swish_identity.domain.user import User, UserNotFoundError, UserRepository


class UpdateProfileCommand:
    """Apply a partial profile update to the current user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: Optional[str] = None,
        contact: Optional[str] = None,
        bio: Optional[str] = None,
        skills: Union[str, Iterable[str], None] = None,
        role_fields: Optional[Mapping[str, Any]] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.update_profile(
            name=name,
            contact=contact,
            bio=bio,
            skills=skills,
            role_fields=role_fields,
        )
        await self._user_repo.save(user)
        return user
