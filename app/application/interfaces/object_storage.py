"""Interface ObjectStorage - Puerto para el almacenamiento de documentos."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.domain.value_objects import FileDescriptor


@dataclass
class UploadedFile:
    """Parte de archivo recibida en el formulario multipart."""

    filename: str
    content_type: str | None
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def describe(self) -> FileDescriptor:
        """Retorna el descriptor usado por la validación de archivos."""
        return FileDescriptor(
            filename=self.filename,
            content_type=self.content_type,
            size=self.size,
        )


@dataclass
class UploadResult:
    success: bool
    public_url: str | None = None
    object_key: str | None = None
    error: str | None = None


class ObjectStorage(ABC):
    """
    Puerto para el almacenamiento de objetos.

    Las fallas de escritura se reportan en UploadResult, no como excepción.
    """

    @abstractmethod
    async def upload(
        self,
        file: UploadedFile,
        bucket: str,
        folder: str,
        name: str | None = None,
    ) -> UploadResult:
        """
        Sube el archivo y retorna su referencia pública.

        Args:
            file: Archivo a subir.
            bucket: Bucket destino.
            folder: Carpeta dentro del bucket.
            name: Nombre del objeto; si es None se genera uno.
        """
        raise NotImplementedError

    @abstractmethod
    async def remove(self, bucket: str, object_key: str) -> None:
        """Elimina un objeto previamente subido."""
        raise NotImplementedError
