"""Campus identities: users, credentials, registration and login.

Public API:
- AuthenticationService: register, authenticate, get_user
- UpdateProfileCommand: partial profile updates
- PasswordHashingService: bcrypt hashing
- PhotoStorage: profile photo upload port
"""

from swish_identity.application.commands import UpdateProfileCommand
from swish_identity.application.services import (
    AuthenticationService,
    PhotoUpload,
    RegistrationCandidate,
)
from swish_identity.exceptions import (
    InvalidCredentialsError,
    PhotoStorageError,
    WeakPasswordError,
)
from swish_identity.services import PasswordHashingService, PhotoStorage, StoredPhoto

__all__ = [
    "AuthenticationService",
    "InvalidCredentialsError",
    "PasswordHashingService",
    "PhotoStorage",
    "PhotoStorageError",
    "PhotoUpload",
    "RegistrationCandidate",
    "StoredPhoto",
    "UpdateProfileCommand",
    "WeakPasswordError",
]
