"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Iterable, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from swish.domain.shared.time import ensure_tz_aware
from swish_identity.domain.user import (
    AdminProfile,
    Email,
    EmailAlreadyExistsError,
    FacultyProfile,
    RoleProfile,
    StudentProfile,
    User,
    UserRepository,
    UserRole,
)
from swish_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

_ROLE_COLUMNS = (
    "student_id",
    "year",
    "department",
    "employee_id",
    "designation",
    "permissions",
)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        ids = set(user_ids)
        if not ids:
            return {}

        stmt = select(UserModel).where(UserModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return {model.id: self._map_to_domain(model) for model in result.scalars()}

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info(
                    "Created user: %s (email: %s, role: %s)",
                    user.id,
                    user.email,
                    user.role.value,
                )

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            profile=self._profile_from_model(model),
            campus=model.campus,
            contact=model.contact or "",
            profile_photo=model.profile_photo or "",
            bio=model.bio or "",
            skills=model.skills or [],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _profile_from_model(self, model: UserModel) -> RoleProfile:
        role = UserRole(model.role)
        if role == UserRole.STUDENT:
            return StudentProfile(
                student_id=model.student_id or "",
                department=model.department or "",
                year=model.year or "",
            )
        if role == UserRole.FACULTY:
            return FacultyProfile(
                employee_id=model.employee_id or "",
                department=model.department or "",
                designation=model.designation or "",
            )
        if model.permissions:
            return AdminProfile(permissions=tuple(model.permissions))
        return AdminProfile()

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            campus=user.campus,
            contact=user.contact,
            profile_photo=user.profile_photo,
            bio=user.bio,
            skills=user.skills,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._apply_profile(model, user.profile)
        return model

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.contact = user.contact
        model.profile_photo = user.profile_photo
        model.bio = user.bio
        model.skills = user.skills
        model.updated_at = user.updated_at
        self._apply_profile(model, user.profile)

    def _apply_profile(self, model: UserModel, profile: RoleProfile) -> None:
        # Columns that do not belong to the role stay NULL
        values = profile.as_dict()
        for column in _ROLE_COLUMNS:
            setattr(model, column, values.get(column))
