"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.clock import Clock, FakeClock, SystemClock
from app.application.interfaces.object_storage import (
    ObjectStorage,
    UploadedFile,
    UploadResult,
)
from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.application.interfaces.tracking_number_generator import (
    FakeTrackingNumberGenerator,
    RandomTrackingNumberGenerator,
    TrackingNumberGenerator,
)

__all__ = [
    # Repositories
    "ReservationRepo",
    "ReservationFilter",
    # Storage
    "ObjectStorage",
    "UploadedFile",
    "UploadResult",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "TrackingNumberGenerator",
    "RandomTrackingNumberGenerator",
    "FakeTrackingNumberGenerator",
]
