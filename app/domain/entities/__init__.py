"""Entidades del dominio de reservaciones."""

from app.domain.entities.contract import Contract, PaymentSchedule, PropertyInfo
from app.domain.entities.reservation import Reservation, ReservationStatus

__all__ = [
    # Reservation
    "Reservation",
    "ReservationStatus",
    # Contract (solo lectura)
    "Contract",
    "PaymentSchedule",
    "PropertyInfo",
]
