"""Identity services - password hashing and photo storage."""

from swish_identity.services.password_service import PasswordHashingService
from swish_identity.services.photo_storage import (
    DEFAULT_MAX_PHOTO_BYTES,
    PhotoStorage,
    StoredPhoto,
)

__all__ = [
    "DEFAULT_MAX_PHOTO_BYTES",
    "PasswordHashingService",
    "PhotoStorage",
    "StoredPhoto",
]
