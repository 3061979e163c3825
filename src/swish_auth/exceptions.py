"""Authentication exceptions.

These exceptions are raised by the swish_auth package. The API turns every
AuthError into a 401 response before any store access happens.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class MissingTokenError(AuthError):
    """Raised when a protected operation is called without a bearer token."""

    code = "MISSING_TOKEN"

    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message)
