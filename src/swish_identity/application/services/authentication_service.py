"""Authentication service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
import secrets
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Mapping,
    Optional,
    Sequence,
)
from uuid import UUID

from swish.domain.shared.exceptions import ValidationError
from swish_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidAdminCodeError,
    User,
    UserNotFoundError,
    UserRole,
    build_role_profile,
)
from swish_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from swish_auth import JWTService
    from swish_identity.domain.user import UserRepository
    from swish_identity.repositories import UserCredentialRepository
    from swish_identity.services import (
        PasswordHashingService,
        PhotoStorage,
        StoredPhoto,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhotoUpload:
    """A profile photo as received from the client."""

    content: bytes
    content_type: Optional[str]
    filename: Optional[str]


@dataclass(frozen=True)
class RegistrationCandidate:
    """Everything a client sends to create an account.

    ``role_fields`` is passed to the role variant as-is, so it may hold
    fields for any role; only the ones the chosen role owns are kept.
    """

    name: str
    email: str
    password: str
    role: str = UserRole.STUDENT.value
    contact: str = ""
    role_fields: Mapping[str, Any] = field(default_factory=dict)
    admin_code: Optional[str] = None
    photo: Optional[PhotoUpload] = None


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates swish_auth (tokens) and the identity infrastructure
    (password hashing, photo storage) with the User domain to provide:
    - User registration
    - Login with password
    - Lookup of the authenticated user
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        admin_access_code: str,
        campus: str,
        photo_storage: Optional[PhotoStorage] = None,
        allowed_email_domains: Sequence[str] = (),
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._admin_access_code = admin_access_code
        self._campus = campus
        self._photo_storage = photo_storage
        self._allowed_domains = tuple(d.lower() for d in allowed_email_domains)

    async def register(
        self,
        candidate: RegistrationCandidate,
        commit: Optional[Callable[[], Awaitable[None]]] = None,
    ) -> tuple[User, str]:
        """Create an account and sign the new user in.

        Nothing is written unless every check passes. A photo uploaded on the
        way is removed again if anything after the upload fails, including
        the ``commit`` callback that makes the new rows durable.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        InvalidAdminCodeError
            If an admin account is requested without the right access code
        ValidationError
            On missing or malformed fields, a weak password or an email
            domain that is not allowed to register
        PhotoStorageError
            If the photo cannot be stored
        """
        email = Email(candidate.email)
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.value)

        role = self._parse_role(candidate.role)
        if role == UserRole.ADMIN:
            self._check_admin_code(candidate.admin_code)
        self._check_email_domain(email)

        password_hash = await asyncio.to_thread(
            self._password_service.hash,
            candidate.password,
        )
        profile = build_role_profile(role, candidate.role_fields)

        photo: StoredPhoto | None = None
        try:
            if candidate.photo is not None:
                photo = await self._upload_photo(candidate.photo)

            user = User.create(
                name=candidate.name,
                email=email,
                profile=profile,
                campus=self._campus,
                contact=candidate.contact,
                profile_photo=photo.url if photo else "",
            )
            await self._user_repo.save(user)
            await self._credential_repo.save(user_id=user.id, password_hash=password_hash)
            if commit is not None:
                await commit()
        except Exception:
            if photo is not None:
                await self._discard_photo(photo)
            raise

        token = self._jwt_service.issue_token(user.id)
        logger.info("User registered: %s (role: %s)", user.email, role.value)
        return user, token

    async def authenticate(self, email: str, password: str) -> tuple[User, str]:
        """Check a password and issue a token.

        Unknown emails and wrong passwords fail the same way and take about
        the same time.

        Raises
        ------
        InvalidCredentialsError
            If the credentials do not match an account
        """
        user = await self._find_user_for_login(email)
        credential = (
            await self._credential_repo.find_by_user_id(user.id) if user else None
        )

        if user is None or credential is None:
            await asyncio.to_thread(self._password_service.verify_dummy, password)
            raise InvalidCredentialsError

        password_ok = await asyncio.to_thread(
            self._password_service.verify,
            password,
            credential.password_hash,
        )
        if not password_ok:
            logger.info("Failed login for user: %s", user.id)
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)
        token = self._jwt_service.issue_token(user.id)

        logger.info("User logged in: %s", user.email)
        return user, token

    async def get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def _find_user_for_login(self, email: str) -> User | None:
        try:
            email_obj = Email(email)
        except ValidationError:
            return None
        return await self._user_repo.find_by_email(email_obj)

    def _parse_role(self, role: str | None) -> UserRole:
        if not role:
            return UserRole.STUDENT
        try:
            return UserRole(role.strip().lower())
        except ValueError as e:
            allowed = ", ".join(r.value for r in UserRole)
            msg = f"Role must be one of: {allowed}"
            raise ValidationError(msg, details={"field": "role"}) from e

    def _check_admin_code(self, admin_code: str | None) -> None:
        supplied = (admin_code or "").encode("utf-8")
        expected = self._admin_access_code.encode("utf-8")
        if not expected or not secrets.compare_digest(supplied, expected):
            logger.warning("Admin registration rejected: bad access code")
            raise InvalidAdminCodeError

    def _check_email_domain(self, email: Email) -> None:
        if self._allowed_domains and email.domain not in self._allowed_domains:
            msg = "Registration is limited to campus email addresses"
            raise ValidationError(
                msg,
                details={"field": "email", "domain": email.domain},
            )

    async def _upload_photo(self, upload: PhotoUpload) -> StoredPhoto:
        if self._photo_storage is None:
            msg = "Profile photo uploads are not enabled"
            raise ValidationError(msg, details={"field": "profile_photo"})
        return await self._photo_storage.upload(
            upload.content,
            upload.content_type,
            upload.filename,
        )

    async def _discard_photo(self, photo: StoredPhoto) -> None:
        if self._photo_storage is None:
            return
        try:
            await self._photo_storage.delete(photo.key)
            logger.info("Removed photo %s after failed registration", photo.key)
        except Exception:
            logger.exception("Could not remove orphaned photo %s", photo.key)
