"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from uuid import UUID

from swish.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, details={"field": "email"})


class EmailAlreadyExistsError(ValidationError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class InvalidAdminCodeError(ValidationError):
    """Admin registration attempted without the correct access code."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid admin access code",
            code=ErrorCode.INVALID_ADMIN_CODE,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str | UUID) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )
