"""
Capa de Dominio - Reservaciones de propiedades.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Reservation y las entidades de contrato de solo lectura
- value_objects/: TrackingNumber y la validación de archivos
- errors.py: Excepciones específicas del dominio
- constants.py: Constantes del dominio
"""

from app.domain.constants import (
    RESERVATION_STATUS_APPROVED,
    RESERVATION_STATUS_PENDING,
    RESERVATION_STATUS_REJECTED,
)
from app.domain.entities import (
    Contract,
    PaymentSchedule,
    PropertyInfo,
    Reservation,
    ReservationStatus,
)
from app.domain.errors import (
    ConfigurationError,
    DomainError,
    FileTooLargeError,
    InvalidFileTypeError,
    InvalidIncomeError,
    InvalidYearsEmployedError,
    MissingRequiredFieldsError,
    PersistenceError,
    ReservationNotFoundError,
    UploadFailedError,
    UploadPolicyError,
    ValidationError,
)
from app.domain.value_objects import TrackingNumber

__all__ = [
    "RESERVATION_STATUS_APPROVED",
    "RESERVATION_STATUS_PENDING",
    "RESERVATION_STATUS_REJECTED",
    "Contract",
    "PaymentSchedule",
    "PropertyInfo",
    "Reservation",
    "ReservationStatus",
    "ConfigurationError",
    "DomainError",
    "FileTooLargeError",
    "InvalidFileTypeError",
    "InvalidIncomeError",
    "InvalidYearsEmployedError",
    "MissingRequiredFieldsError",
    "PersistenceError",
    "ReservationNotFoundError",
    "UploadFailedError",
    "UploadPolicyError",
    "ValidationError",
    "TrackingNumber",
]
