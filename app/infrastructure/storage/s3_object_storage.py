"""S3-compatible object storage for identity documents.

Uses a boto3 synchronous client run in the default thread-pool executor so
the async request path is never blocked by network I/O.
"""

import asyncio
import logging
import os
import uuid
from functools import partial

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from app.application.interfaces.object_storage import ObjectStorage, UploadedFile, UploadResult

logger = logging.getLogger(__name__)


def build_object_key(folder: str, filename: str, name: str) -> str:
    """Build ``<folder>/<name><ext>``; path components of ``filename`` are dropped."""
    safe_name = os.path.basename(filename or "")
    _, ext = os.path.splitext(safe_name)
    key = f"{name}{ext.lower()}"
    folder = folder.strip("/")
    return f"{folder}/{key}" if folder else key


class S3ObjectStorage(ObjectStorage):
    """Thin wrapper around a boto3 S3 client."""

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        endpoint: str | None = None,
        region: str = "us-east-1",
        public_base_url: str | None = None,
    ):
        self._endpoint = endpoint
        self._region = region
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._client = boto3.client(
            "s3",
            endpoint_url=endpoint,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            region_name=region,
            config=BotoConfig(
                signature_version="s3v4",
                s3={"addressing_style": "path"},
            ),
        )

    def public_url(self, bucket: str, object_key: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{bucket}/{object_key}"
        if self._endpoint:
            return f"{self._endpoint.rstrip('/')}/{bucket}/{object_key}"
        return f"https://{bucket}.s3.{self._region}.amazonaws.com/{object_key}"

    async def upload(
        self,
        file: UploadedFile,
        bucket: str,
        folder: str,
        name: str | None = None,
    ) -> UploadResult:
        object_key = build_object_key(folder, file.filename, name or uuid.uuid4().hex)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(
                None,
                partial(
                    self._client.put_object,
                    Bucket=bucket,
                    Key=object_key,
                    Body=file.data,
                    ContentType=file.content_type or "application/octet-stream",
                ),
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error(
                "S3 upload failed",
                extra={"bucket": bucket, "object_key": object_key, "error": str(exc)},
            )
            return UploadResult(success=False, object_key=object_key, error=str(exc))

        return UploadResult(
            success=True,
            public_url=self.public_url(bucket, object_key),
            object_key=object_key,
        )

    async def remove(self, bucket: str, object_key: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None,
            partial(self._client.delete_object, Bucket=bucket, Key=object_key),
        )
        logger.info("S3 object removed", extra={"bucket": bucket, "object_key": object_key})
