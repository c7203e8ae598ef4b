import uuid

from app.application.interfaces.object_storage import ObjectStorage, UploadedFile, UploadResult
from app.infrastructure.storage.s3_object_storage import build_object_key


class InMemoryObjectStorage(ObjectStorage):
    """Object store kept in a dict; ``fail_with`` makes every upload fail."""

    def __init__(self, base_url: str = "memory://storage") -> None:
        self._base_url = base_url.rstrip("/")
        self.objects: dict[tuple[str, str], bytes] = {}
        self.upload_count = 0
        self.fail_with: str | None = None

    async def upload(
        self,
        file: UploadedFile,
        bucket: str,
        folder: str,
        name: str | None = None,
    ) -> UploadResult:
        if self.fail_with:
            return UploadResult(success=False, error=self.fail_with)
        object_key = build_object_key(folder, file.filename, name or uuid.uuid4().hex)
        self.objects[(bucket, object_key)] = file.data
        self.upload_count += 1
        return UploadResult(
            success=True,
            public_url=f"{self._base_url}/{bucket}/{object_key}",
            object_key=object_key,
        )

    async def remove(self, bucket: str, object_key: str) -> None:
        self.objects.pop((bucket, object_key), None)
