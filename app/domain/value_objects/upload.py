"""Validación de archivos subidos contra una política de tipo y tamaño."""

from dataclasses import dataclass

from app.domain.constants import ID_DOCUMENT_ALLOWED_TYPES, ID_DOCUMENT_MAX_SIZE
from app.domain.errors import FileTooLargeError, InvalidFileTypeError


@dataclass(frozen=True)
class FileDescriptor:
    """Archivo candidato: nombre, tipo MIME declarado y tamaño en bytes."""

    filename: str
    content_type: str | None
    size: int


@dataclass(frozen=True)
class UploadPolicy:
    """Tipos MIME permitidos y tamaño máximo en bytes."""

    allowed_types: frozenset[str]
    max_size: int


ID_DOCUMENT_POLICY = UploadPolicy(
    allowed_types=ID_DOCUMENT_ALLOWED_TYPES,
    max_size=ID_DOCUMENT_MAX_SIZE,
)


def validate_file(file: FileDescriptor, policy: UploadPolicy) -> FileDescriptor:
    """
    Verifica el archivo contra la política, sin efectos secundarios.

    Raises:
        InvalidFileTypeError: si el tipo declarado no está permitido.
        FileTooLargeError: si el tamaño excede el máximo.
    """
    content_type = (file.content_type or "").lower()
    if content_type not in policy.allowed_types:
        raise InvalidFileTypeError(file.content_type, policy.allowed_types)
    if file.size > policy.max_size:
        raise FileTooLargeError(file.size, policy.max_size)
    return file
