from dataclasses import dataclass
from datetime import datetime

from app.domain.entities import (
    Contract,
    PaymentSchedule,
    PropertyInfo,
    Reservation,
    ReservationStatus,
)


@dataclass(frozen=True)
class ReservationFilter:
    user_id: str | None = None
    status: str | None = None


class ReservationRepo:
    """
    Puerto del almacén de reservaciones.

    Las implementaciones traducen las fallas del almacén a PersistenceError
    conservando el mensaje original.
    """

    async def create_reservation(self, reservation: Reservation) -> Reservation:
        raise NotImplementedError

    async def update_status(
        self,
        reservation_id: str,
        status: ReservationStatus,
        updated_at: datetime,
        rejected_by: str | None = None,
        rejection_reason: str | None = None,
    ) -> Reservation | None:
        """Actualiza un solo renglón; retorna None si ningún renglón coincide."""
        raise NotImplementedError

    async def list_reservations(self, filters: ReservationFilter) -> list[Reservation]:
        """Retorna las reservaciones ordenadas por created_at descendente."""
        raise NotImplementedError

    async def get_contract_by_reservation(self, reservation_id: str) -> Contract | None:
        raise NotImplementedError

    async def list_payment_schedules(self, contract_id: str) -> list[PaymentSchedule]:
        """Retorna las cuotas ordenadas por installment_number ascendente."""
        raise NotImplementedError

    async def get_property_info(self, property_id: str) -> PropertyInfo | None:
        raise NotImplementedError

    async def ping(self) -> None:
        raise NotImplementedError
