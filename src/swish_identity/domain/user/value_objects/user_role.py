from enum import Enum


class UserRole(str, Enum):
    """Campus roles. Fixed at registration."""

    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"
