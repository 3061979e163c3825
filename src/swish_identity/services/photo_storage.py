"""Profile photo storage port.

Registration hands the uploaded file to a ``PhotoStorage`` and keeps only the
returned URL on the user. Implementations live in
``swish_identity.infrastructure.storage``.
"""

import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePath
from uuid import uuid4

from swish.domain.shared.exceptions import ValidationError

DEFAULT_MAX_PHOTO_BYTES = 5 * 1024 * 1024
PHOTO_KEY_PREFIX = "profiles"


@dataclass(frozen=True)
class StoredPhoto:
    """Location of an uploaded photo."""

    key: str
    url: str


class PhotoStorage(ABC):
    """Stores profile photos and hands back a public URL.

    ``upload`` validates the file before anything leaves the process, so an
    implementation only has to move bytes.
    """

    def __init__(self, max_bytes: int = DEFAULT_MAX_PHOTO_BYTES):
        self._max_bytes = max_bytes

    async def upload(
        self,
        content: bytes,
        content_type: str | None,
        filename: str | None,
    ) -> StoredPhoto:
        """Validate and store a photo.

        Raises
        ------
        ValidationError
            If the file is empty, too large or not an image
        PhotoStorageError
            If the backend rejects the upload
        """
        content_type = self.validate(content, content_type)
        key = self.build_key(filename, content_type)
        return await self._put(key, content, content_type)

    def validate(self, content: bytes, content_type: str | None) -> str:
        """Check size and type, returning the normalized content type."""
        normalized = (content_type or "").split(";")[0].strip().lower()
        if not normalized.startswith("image/"):
            msg = "Profile photo must be an image"
            raise ValidationError(msg, details={"field": "profile_photo"})
        if not content:
            msg = "Profile photo is empty"
            raise ValidationError(msg, details={"field": "profile_photo"})
        if len(content) > self._max_bytes:
            msg = f"Profile photo cannot exceed {self._max_bytes} bytes"
            raise ValidationError(
                msg,
                details={"field": "profile_photo", "size": len(content)},
            )
        return normalized

    @staticmethod
    def build_key(filename: str | None, content_type: str) -> str:
        """Build a collision-free object key, keeping the file extension."""
        extension = PurePath(filename or "").suffix.lower()
        if not extension:
            extension = mimetypes.guess_extension(content_type) or ""
        return f"{PHOTO_KEY_PREFIX}/profile-{uuid4().hex}{extension}"

    @abstractmethod
    async def _put(self, key: str, content: bytes, content_type: str) -> StoredPhoto:
        """Write the bytes under ``key``."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a stored photo."""
