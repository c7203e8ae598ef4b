"""DTOs para reservaciones."""

from dataclasses import dataclass

from app.domain.entities import Contract, PaymentSchedule, PropertyInfo, Reservation


@dataclass
class EnrichedReservation:
    """
    Reservación con su contrato y calendario de pagos.

    contract y payment_schedules son None cuando no existe contrato;
    payment_schedules es una lista (posiblemente vacía) cuando sí existe.
    """

    reservation: Reservation
    contract: Contract | None = None
    payment_schedules: list[PaymentSchedule] | None = None
    property_info: PropertyInfo | None = None


@dataclass
class ReservationListing:
    """Resultado del listado de reservaciones enriquecidas."""

    items: list[EnrichedReservation]

    @property
    def total(self) -> int:
        return len(self.items)
