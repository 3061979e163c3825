"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from swish_auth import InvalidTokenError, JWTService

SECRET = "unit-test-secret"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


class TestJWTService:
    def test_round_trip(self, service):
        user_id = uuid4()

        payload = service.verify_token(service.issue_token(user_id))

        assert payload.user_id == user_id

    def test_default_lifetime_is_seven_days(self, service):
        payload = service.verify_token(service.issue_token(uuid4()))

        assert payload.exp - payload.issued_at == timedelta(days=7)

    def test_expired_token(self, service):
        token = service.issue_token(uuid4(), expires_delta=timedelta(seconds=-5))

        with pytest.raises(InvalidTokenError, match="expired"):
            service.verify_token(token)

    def test_other_secret(self, service):
        token = JWTService(secret_key="someone-else").issue_token(uuid4())

        with pytest.raises(InvalidTokenError):
            service.verify_token(token)

    def test_tampered_token(self, service):
        token = service.issue_token(uuid4())
        header, payload, signature = token.split(".")

        with pytest.raises(InvalidTokenError):
            service.verify_token(f"{header}.{payload}x.{signature}")

    def test_garbage(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify_token("not-a-token")

    def test_subject_must_be_uuid(self, service):
        token = jwt.encode(
            {"sub": "alice", "iat": 1_700_000_000, "exp": 4_000_000_000},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            service.verify_token(token)

    def test_missing_claims(self, service):
        token = jwt.encode({"sub": str(uuid4())}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            service.verify_token(token)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="")
