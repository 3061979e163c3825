"""Authentication schemas for request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from swish_identity.domain.user import User


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=1024)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "asha@sigce.edu",
                "password": "securepassword123",
            },
        },
    )


class UpdateProfileRequest(BaseModel):
    """Partial profile update. Omitted fields are left untouched.

    ``skills`` may also be a JSON-encoded list, as older clients send it.
    Role fields that do not belong to the user's role are ignored.
    """

    name: Optional[str] = Field(default=None, max_length=100)
    contact: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=1000)
    skills: Optional[Union[list[str], str]] = None

    student_id: Optional[str] = Field(default=None, max_length=50)
    department: Optional[str] = Field(default=None, max_length=100)
    year: Optional[str] = Field(default=None, max_length=20)
    employee_id: Optional[str] = Field(default=None, max_length=50)
    faculty_department: Optional[str] = Field(default=None, max_length=100)
    designation: Optional[str] = Field(default=None, max_length=100)

    ROLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "student_id",
        "department",
        "year",
        "employee_id",
        "faculty_department",
        "designation",
    )

    def role_fields(self) -> dict[str, str]:
        values = {key: getattr(self, key) for key in self.ROLE_FIELDS}
        return {key: value for key, value in values.items() if value is not None}


class UserResponse(BaseModel):
    """Public user data. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    contact: str
    role: str
    profile_photo: str
    bio: str
    skills: list[str]
    campus: str
    created_at: datetime
    updated_at: datetime

    student_id: Optional[str] = None
    department: Optional[str] = None
    year: Optional[str] = None
    employee_id: Optional[str] = None
    designation: Optional[str] = None
    permissions: Optional[list[str]] = None

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        role_values = {
            key: value for key, value in user.profile.as_dict().items() if value
        }
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            contact=user.contact,
            role=user.role.value,
            profile_photo=user.profile_photo,
            bio=user.bio,
            skills=user.skills,
            campus=user.campus,
            created_at=user.created_at,
            updated_at=user.updated_at,
            **role_values,
        )


class AuthResponse(BaseModel):
    """Response schema for registration and login."""

    message: str
    token: str
    user: UserResponse


class ProfileResponse(BaseModel):
    """Response schema for a profile update."""

    message: str
    user: UserResponse
