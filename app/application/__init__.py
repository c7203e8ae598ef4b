"""
Capa de Aplicación - Reservaciones de propiedades.

Esta capa contiene los casos de uso, DTOs e interfaces (puertos).
Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Alta, rechazo y listado de reservaciones
- dtos/: Data Transfer Objects
- interfaces/: Puertos (contratos para adaptadores)
"""

from app.application.dtos import EnrichedReservation, ReservationListing
from app.application.interfaces import (
    Clock,
    FakeClock,
    FakeTrackingNumberGenerator,
    ObjectStorage,
    RandomTrackingNumberGenerator,
    ReservationFilter,
    ReservationRepo,
    SystemClock,
    TrackingNumberGenerator,
    UploadedFile,
    UploadResult,
)

__all__ = [
    # DTOs
    "EnrichedReservation",
    "ReservationListing",
    # Interfaces - Repositories
    "ReservationRepo",
    "ReservationFilter",
    # Interfaces - Storage
    "ObjectStorage",
    "UploadedFile",
    "UploadResult",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "TrackingNumberGenerator",
    "RandomTrackingNumberGenerator",
    "FakeTrackingNumberGenerator",
]
