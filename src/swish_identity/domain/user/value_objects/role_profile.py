"""Role-specific profile payloads.

A user carries exactly one of these variants. The variant type decides the
user's role, so the role cannot drift away from the fields that go with it.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, Optional, Union

from swish_identity.domain.user.value_objects.user_role import UserRole

DEFAULT_ADMIN_PERMISSIONS = ("manage_users", "moderate_content")


class _ProfileFields:
    """Behaviour shared by all role variants."""

    role: ClassVar[UserRole]

    def updated(self, changes: Mapping[str, Any]):
        """Return a copy with the given fields replaced.

        Keys this variant does not own are ignored, as are ``None`` values.
        """
        own = {f.name for f in dataclasses.fields(self)}  # type: ignore[arg-type]
        applicable = {
            key: value
            for key, value in changes.items()
            if key in own and value is not None
        }
        if not applicable:
            return self
        return dataclasses.replace(self, **applicable)  # type: ignore[type-var]

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class StudentProfile(_ProfileFields):
    role: ClassVar[UserRole] = UserRole.STUDENT

    student_id: str = ""
    department: str = ""
    year: str = ""

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> StudentProfile:
        return cls(
            student_id=fields.get("student_id") or "",
            department=fields.get("department") or "",
            year=fields.get("year") or "",
        )


@dataclass(frozen=True)
class FacultyProfile(_ProfileFields):
    role: ClassVar[UserRole] = UserRole.FACULTY

    employee_id: str = ""
    department: str = ""
    designation: str = ""

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> FacultyProfile:
        # Faculty forms send the department as ``faculty_department``
        return cls(
            employee_id=fields.get("employee_id") or "",
            department=(
                fields.get("faculty_department") or fields.get("department") or ""
            ),
            designation=fields.get("designation") or "",
        )

    def updated(self, changes: Mapping[str, Any]) -> FacultyProfile:
        if changes.get("faculty_department"):
            changes = {**changes, "department": changes["faculty_department"]}
        return super().updated(changes)


@dataclass(frozen=True)
class AdminProfile(_ProfileFields):
    role: ClassVar[UserRole] = UserRole.ADMIN

    permissions: tuple[str, ...] = field(default=DEFAULT_ADMIN_PERMISSIONS)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> AdminProfile:
        permissions = fields.get("permissions")
        if permissions:
            return cls(permissions=tuple(permissions))
        return cls()

    @property
    def department(self) -> Optional[str]:
        return None

    def as_dict(self) -> dict[str, Any]:
        return {"permissions": list(self.permissions)}


RoleProfile = Union[StudentProfile, FacultyProfile, AdminProfile]

_VARIANTS: dict[UserRole, type[RoleProfile]] = {
    UserRole.STUDENT: StudentProfile,
    UserRole.FACULTY: FacultyProfile,
    UserRole.ADMIN: AdminProfile,
}


def build_role_profile(
    role: Union[str, UserRole],
    fields: Mapping[str, Any] | None = None,
) -> RoleProfile:
    """Build the profile variant for a role from loosely typed input fields."""
    role = role if isinstance(role, UserRole) else UserRole(role)
    return _VARIANTS[role].from_fields(fields or {})
