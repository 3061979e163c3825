"""
Test data factories for creating deterministic test entities.

Usage:
    from tests.shared.fixtures.factories import TestUserFactory

    def test_something():
        user = TestUserFactory.alice()
"""

from dataclasses import dataclass
from uuid import UUID

from swish.application.context import UserContext
from swish_identity.domain.user import (
    AdminProfile,
    FacultyProfile,
    StudentProfile,
    User,
)

TEST_CAMPUS = "SIGCE Campus"


@dataclass(frozen=True)
class TestUserFactory:
    """Factory for creating test users with deterministic IDs.

    The UUIDs are designed to be easily recognizable in logs and debugging.
    """

    __test__ = False

    ALICE_ID = UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
    ALICE_EMAIL = "alice@sigce.edu"

    BOB_ID = UUID("bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb")
    BOB_EMAIL = "bob@sigce.edu"

    ADMIN_ID = UUID("00000000-0000-0000-0000-000000000001")
    ADMIN_EMAIL = "admin@sigce.edu"

    @classmethod
    def alice(cls) -> User:
        """Alice - a computer science student."""
        return User(
            id=cls.ALICE_ID,
            name="Alice Rao",
            email=cls.ALICE_EMAIL,
            profile=StudentProfile(
                student_id="S-1001",
                department="Computer Science",
                year="3",
            ),
            campus=TEST_CAMPUS,
        )

    @classmethod
    def bob(cls) -> User:
        """Bob - a faculty member."""
        return User(
            id=cls.BOB_ID,
            name="Bob Menon",
            email=cls.BOB_EMAIL,
            profile=FacultyProfile(
                employee_id="E-77",
                department="Physics",
                designation="Professor",
            ),
            campus=TEST_CAMPUS,
        )

    @classmethod
    def admin(cls) -> User:
        return User(
            id=cls.ADMIN_ID,
            name="Campus Admin",
            email=cls.ADMIN_EMAIL,
            profile=AdminProfile(),
            campus=TEST_CAMPUS,
        )

    @classmethod
    def alice_context(cls) -> UserContext:
        return UserContext(user_id=cls.ALICE_ID)

    @classmethod
    def bob_context(cls) -> UserContext:
        return UserContext(user_id=cls.BOB_ID)
