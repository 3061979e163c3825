"""Photo storage used when no object store is configured."""

from swish_identity.exceptions import PhotoStorageError
from swish_identity.services.photo_storage import PhotoStorage, StoredPhoto


class DisabledPhotoStorage(PhotoStorage):
    """Rejects every upload. Registration without a photo still works."""

    async def _put(self, key: str, content: bytes, content_type: str) -> StoredPhoto:
        msg = "Profile photo uploads are not enabled"
        raise PhotoStorageError(msg)

    async def delete(self, key: str) -> None:
        return None
