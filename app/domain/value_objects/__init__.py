"""Value Objects del dominio de reservaciones."""

from app.domain.value_objects.tracking_number import TrackingNumber
from app.domain.value_objects.upload import (
    ID_DOCUMENT_POLICY,
    FileDescriptor,
    UploadPolicy,
    validate_file,
)

__all__ = [
    "TrackingNumber",
    "FileDescriptor",
    "UploadPolicy",
    "ID_DOCUMENT_POLICY",
    "validate_file",
]
