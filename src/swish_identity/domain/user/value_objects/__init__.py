from swish_identity.domain.user.value_objects.email import Email
from swish_identity.domain.user.value_objects.role_profile import (
    DEFAULT_ADMIN_PERMISSIONS,
    AdminProfile,
    FacultyProfile,
    RoleProfile,
    StudentProfile,
    build_role_profile,
)
from swish_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "DEFAULT_ADMIN_PERMISSIONS",
    "AdminProfile",
    "Email",
    "FacultyProfile",
    "RoleProfile",
    "StudentProfile",
    "UserRole",
    "build_role_profile",
]
