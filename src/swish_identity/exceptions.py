"""Identity and authentication exceptions.

These exceptions are raised by the swish_identity package and are turned
into HTTP responses by the API's central exception handlers.
"""

from swish.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class InvalidCredentialsError(DomainException):
    """Raised when email or password is incorrect during login.

    The message is the same whether the email is unknown or the password
    is wrong.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code=ErrorCode.INVALID_CREDENTIALS)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, details={"field": "password"})


class PhotoStorageError(ExternalServiceError):
    """Raised when a profile photo cannot be stored."""

    def __init__(self, message: str = "Profile photo upload failed"):
        super().__init__(message, code=ErrorCode.PHOTO_UPLOAD_FAILED)
