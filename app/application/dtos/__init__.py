"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from app.application.dtos.reservation_dto import EnrichedReservation, ReservationListing

__all__ = [
    "EnrichedReservation",
    "ReservationListing",
]
