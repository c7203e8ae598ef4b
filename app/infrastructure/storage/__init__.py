"""Adaptadores de almacenamiento de objetos."""

from app.infrastructure.storage.s3_object_storage import S3ObjectStorage, build_object_key

__all__ = [
    "S3ObjectStorage",
    "build_object_key",
]
