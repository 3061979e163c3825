"""User aggregate for identity and public profile data."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Union
from uuid import UUID, uuid4

from swish.domain.shared.exceptions import ValidationError
from swish.domain.shared.time import utc_now
from swish_identity.domain.user.value_objects import (
    Email,
    RoleProfile,
    UserRole,
)

NAME_MAX_LENGTH = 100


def _normalize_name(name: str | None) -> str:
    value = (name or "").strip()
    if not value:
        raise ValidationError("Name is required", details={"field": "name"})
    if len(value) > NAME_MAX_LENGTH:
        msg = f"Name cannot exceed {NAME_MAX_LENGTH} characters"
        raise ValidationError(msg, details={"field": "name"})
    return value


def _normalize_skills(skills: Union[str, Iterable[str], None]) -> list[str]:
    """Accept a list of skills or a JSON-encoded list (as some clients send)."""
    if skills is None:
        return []
    if isinstance(skills, str):
        try:
            skills = json.loads(skills)
        except ValueError as e:
            msg = "Skills must be a list of strings"
            raise ValidationError(msg, details={"field": "skills"}) from e
        if not isinstance(skills, list):
            msg = "Skills must be a list of strings"
            raise ValidationError(msg, details={"field": "skills"})

    normalized: list[str] = []
    for skill in skills:
        value = str(skill).strip()
        if value and value not in normalized:
            normalized.append(value)
    return normalized


class User:
    """
    User aggregate root.

    Holds identity (id, email), the public profile, and exactly one
    role-specific payload. The password hash lives in a separate credential
    record and is never part of this aggregate.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        profile: RoleProfile,
        campus: str,
        contact: str = "",
        profile_photo: str = "",
        bio: str = "",
        skills: Optional[Iterable[str]] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._profile = profile
        self._campus = campus
        self._contact = contact or ""
        self._profile_photo = profile_photo or ""
        self._bio = bio or ""
        self._skills = list(skills or [])
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def role(self) -> UserRole:
        return self._profile.role

    @property
    def profile(self) -> RoleProfile:
        return self._profile

    @property
    def department(self) -> Optional[str]:
        return self._profile.department or None

    @property
    def campus(self) -> str:
        return self._campus

    @property
    def contact(self) -> str:
        return self._contact

    @property
    def profile_photo(self) -> str:
        return self._profile_photo

    @property
    def bio(self) -> str:
        return self._bio

    @property
    def skills(self) -> list[str]:
        return list(self._skills)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(  # NOQA: PLR0913
        self,
        name: Optional[str] = None,
        contact: Optional[str] = None,
        bio: Optional[str] = None,
        skills: Union[str, Iterable[str], None] = None,
        role_fields: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Apply a partial profile update.

        Arguments left as None are not touched. Role fields are handed to the
        role variant, which keeps the ones it owns. Email and role never change.
        """
        if name is not None:
            self._name = _normalize_name(name)
        if contact is not None:
            self._contact = contact
        if bio is not None:
            self._bio = bio
        if skills is not None:
            self._skills = _normalize_skills(skills)
        if role_fields:
            self._profile = self._profile.updated(role_fields)
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        name: str,
        email: Union[str, Email],
        profile: RoleProfile,
        campus: str,
        contact: str = "",
        profile_photo: str = "",
    ) -> User:
        return cls(
            name=_normalize_name(name),
            email=email,
            profile=profile,
            campus=campus,
            contact=(contact or "").strip(),
            profile_photo=profile_photo,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        profile: RoleProfile,
        campus: str,
        contact: str,
        profile_photo: str,
        bio: str,
        skills: Iterable[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        return cls(
            id=id,
            name=name,
            email=email,
            profile=profile,
            campus=campus,
            contact=contact,
            profile_photo=profile_photo,
            bio=bio,
            skills=skills,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self.role.value})"
