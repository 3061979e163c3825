"""Profile photo storage adapters."""

from swish_identity.infrastructure.storage.disabled_photo_storage import (
    DisabledPhotoStorage,
)
from swish_identity.infrastructure.storage.s3_photo_storage import S3PhotoStorage

__all__ = ["DisabledPhotoStorage", "S3PhotoStorage"]
