"""Constantes del dominio."""

RESERVATION_STATUS_PENDING = "pending"
RESERVATION_STATUS_APPROVED = "approved"
RESERVATION_STATUS_REJECTED = "rejected"

TRACKING_NUMBER_PREFIX = "TRK-"
TRACKING_NUMBER_LENGTH = 8

ID_DOCUMENT_BUCKET = "futura"
ID_DOCUMENT_FOLDER = "reservation-ids"
ID_DOCUMENT_ALLOWED_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/webp",
        "application/pdf",
    }
)
ID_DOCUMENT_MAX_SIZE = 10 * 1024 * 1024  # 10MB
