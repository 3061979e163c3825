"""User domain manages campus identities.

This domain handles:
- User aggregate (identity, public profile, role-specific payload)
- Role variants for students, faculty and admins
- Repository contract for user persistence
"""

from swish_identity.domain.user.aggregates import User
from swish_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidAdminCodeError,
    InvalidEmailError,
    UserNotFoundError,
)
from swish_identity.domain.user.repositories import UserRepository
from swish_identity.domain.user.value_objects import (
    DEFAULT_ADMIN_PERMISSIONS,
    AdminProfile,
    Email,
    FacultyProfile,
    RoleProfile,
    StudentProfile,
    UserRole,
    build_role_profile,
)

__all__ = [
    "DEFAULT_ADMIN_PERMISSIONS",
    "AdminProfile",
    "Email",
    "EmailAlreadyExistsError",
    "FacultyProfile",
    "InvalidAdminCodeError",
    "InvalidEmailError",
    "RoleProfile",
    "StudentProfile",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "build_role_profile",
]
