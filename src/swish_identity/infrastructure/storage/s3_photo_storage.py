"""S3-compatible photo storage (AWS S3, MinIO, R2, ...)."""

import asyncio
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from swish_identity.exceptions import PhotoStorageError
from swish_identity.services.photo_storage import (
    DEFAULT_MAX_PHOTO_BYTES,
    PhotoStorage,
    StoredPhoto,
)

logger = logging.getLogger(__name__)


class S3PhotoStorage(PhotoStorage):
    """Stores profile photos in an S3 bucket.

    boto3 is blocking, so every call runs in a worker thread. Explicit
    credentials are optional; without them boto3 falls back to its own
    chain (environment, instance role).
    """

    def __init__(  # NOQA: PLR0913
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        public_base_url: str | None = None,
        max_bytes: int = DEFAULT_MAX_PHOTO_BYTES,
    ):
        super().__init__(max_bytes=max_bytes)
        self._bucket = bucket
        self._region = region
        self._endpoint_url = endpoint_url
        self._access_key_id = access_key_id
        self._secret_access_key = secret_access_key
        self._public_base_url = (public_base_url or "").rstrip("/") or None
        self._client: Any = None

    def _get_client(self) -> Any:
        """Lazy initialization of the S3 client."""
        if self._client is None:
            kwargs: dict[str, Any] = {"region_name": self._region}
            if self._endpoint_url:
                kwargs["endpoint_url"] = self._endpoint_url
                kwargs["config"] = Config(
                    signature_version="s3v4",
                    s3={"addressing_style": "path"},
                )
            if self._access_key_id and self._secret_access_key:
                kwargs["aws_access_key_id"] = self._access_key_id
                kwargs["aws_secret_access_key"] = self._secret_access_key
            self._client = boto3.client("s3", **kwargs)
        return self._client

    def public_url(self, key: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{key}"
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket}/{key}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"

    async def _put(self, key: str, content: bytes, content_type: str) -> StoredPhoto:
        client = self._get_client()
        try:
            await asyncio.to_thread(
                client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=content,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Photo upload to s3://%s/%s failed: %s", self._bucket, key, e)
            raise PhotoStorageError from e

        logger.info("Uploaded profile photo: %s (%d bytes)", key, len(content))
        return StoredPhoto(key=key, url=self.public_url(key))

    async def delete(self, key: str) -> None:
        client = self._get_client()
        try:
            await asyncio.to_thread(client.delete_object, Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            msg = "Profile photo could not be removed"
            raise PhotoStorageError(msg) from e
        logger.info("Deleted profile photo: %s", key)
