"""Integration tests for the identity SQLAlchemy repositories."""

from uuid import uuid4

import pytest

from swish_identity.domain.user import (
    AdminProfile,
    EmailAlreadyExistsError,
    FacultyProfile,
    StudentProfile,
    User,
)
from swish_identity.infrastructure.persistence.sqlalchemy import (
    UserCredentialRepositorySQLAlchemy,
    UserModel,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TEST_CAMPUS, TestUserFactory


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_student(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        alice = TestUserFactory.alice()

        await repo.save(alice)
        await db_session.commit()
        found = await repo.find_by_id(alice.id)

        assert found is not None
        assert found.email == alice.email
        assert found.name == "Alice Rao"
        assert found.profile == StudentProfile(
            student_id="S-1001",
            department="Computer Science",
            year="3",
        )
        assert found.campus == TEST_CAMPUS
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_role_variants_round_trip(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        bob, admin = TestUserFactory.bob(), TestUserFactory.admin()
        await repo.save(bob)
        await repo.save(admin)
        db_session.expunge_all()

        found_bob = await repo.find_by_id(bob.id)
        found_admin = await repo.find_by_id(admin.id)

        assert found_bob is not None
        assert found_bob.profile == FacultyProfile(
            employee_id="E-77",
            department="Physics",
            designation="Professor",
        )
        assert found_admin is not None
        assert found_admin.profile == AdminProfile()

    @pytest.mark.asyncio
    async def test_only_role_columns_are_filled(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        bob = TestUserFactory.bob()
        await repo.save(bob)

        model = await db_session.get(UserModel, bob.id)

        assert model is not None
        assert model.employee_id == "E-77"
        assert model.student_id is None
        assert model.year is None
        assert model.permissions is None

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(TestUserFactory.alice())

        assert await repo.find_by_email("ALICE@sigce.edu") is not None
        assert await repo.exists_by_email("alice@sigce.edu")
        assert not await repo.exists_by_email("nobody@sigce.edu")

    @pytest.mark.asyncio
    async def test_find_by_ids(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        alice, bob = TestUserFactory.alice(), TestUserFactory.bob()
        await repo.save(alice)
        await repo.save(bob)

        found = await repo.find_by_ids([alice.id, bob.id, uuid4()])

        assert set(found) == {alice.id, bob.id}
        assert found[bob.id].name == "Bob Menon"
        assert await repo.find_by_ids([]) == {}

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.save(TestUserFactory.alice())

        twin = User.create(
            name="Alice Again",
            email=TestUserFactory.ALICE_EMAIL,
            profile=StudentProfile(),
            campus=TEST_CAMPUS,
        )
        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(twin)

    @pytest.mark.asyncio
    async def test_update_profile(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        alice = TestUserFactory.alice()
        await repo.save(alice)

        alice.update_profile(bio="Hello", skills=["c"], role_fields={"year": "4"})
        await repo.save(alice)
        db_session.expunge_all()
        found = await repo.find_by_id(alice.id)

        assert found is not None
        assert found.bio == "Hello"
        assert found.skills == ["c"]
        assert found.profile.year == "4"


class TestUserCredentialRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, db_session):
        repo = UserCredentialRepositorySQLAlchemy(db_session)
        user_id = uuid4()

        await repo.save(user_id=user_id, password_hash="$2b$04$hash")
        found = await repo.find_by_user_id(user_id)

        assert found is not None
        assert found.password_hash == "$2b$04$hash"
        assert found.last_login_at is None

    @pytest.mark.asyncio
    async def test_save_again_replaces_hash(self, db_session):
        repo = UserCredentialRepositorySQLAlchemy(db_session)
        user_id = uuid4()

        await repo.save(user_id=user_id, password_hash="old")
        await repo.save(user_id=user_id, password_hash="new")

        found = await repo.find_by_user_id(user_id)
        assert found is not None
        assert found.password_hash == "new"

    @pytest.mark.asyncio
    async def test_update_last_login(self, db_session):
        repo = UserCredentialRepositorySQLAlchemy(db_session)
        user_id = uuid4()
        await repo.save(user_id=user_id, password_hash="hash")

        await repo.update_last_login(user_id)

        found = await repo.find_by_user_id(user_id)
        assert found is not None
        assert found.last_login_at is not None

    @pytest.mark.asyncio
    async def test_unknown_user(self, db_session):
        repo = UserCredentialRepositorySQLAlchemy(db_session)

        assert await repo.find_by_user_id(uuid4()) is None
