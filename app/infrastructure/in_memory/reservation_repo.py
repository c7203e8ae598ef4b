import uuid
from dataclasses import replace
from datetime import datetime

from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.domain.entities import (
    Contract,
    PaymentSchedule,
    PropertyInfo,
    Reservation,
    ReservationStatus,
)
from app.domain.errors import PersistenceError


class InMemoryReservationRepo(ReservationRepo):
    def __init__(self) -> None:
        self.reservations: dict[str, Reservation] = {}
        self.contracts: dict[str, Contract] = {}  # by reservation_id
        self.schedules: dict[str, list[PaymentSchedule]] = {}  # by contract_id
        self.properties: dict[str, PropertyInfo] = {}
        self.insert_count = 0
        self.update_count = 0

        # Failure injection for tests
        self.insert_error: str | None = None
        self.list_error: str | None = None
        self.contract_errors: dict[str, Exception] = {}
        self.schedule_errors: dict[str, Exception] = {}

    # === Seeding ===

    def add_contract(
        self,
        reservation_id: str,
        contract: Contract,
        schedules: list[PaymentSchedule] | None = None,
    ) -> None:
        self.contracts[reservation_id] = contract
        if schedules is not None:
            self.schedules[contract.contract_id] = list(schedules)

    def add_property(self, info: PropertyInfo) -> None:
        self.properties[info.property_id] = info

    # === ReservationRepo ===

    async def create_reservation(self, reservation: Reservation) -> Reservation:
        if self.insert_error:
            raise PersistenceError("create reservation", self.insert_error)
        if any(
            r.tracking_number == reservation.tracking_number for r in self.reservations.values()
        ):
            raise PersistenceError(
                "create reservation",
                f"duplicate key value violates unique constraint: {reservation.tracking_number}",
            )
        saved = replace(reservation, reservation_id=reservation.reservation_id or str(uuid.uuid4()))
        self.reservations[saved.reservation_id] = saved
        self.insert_count += 1
        return replace(saved)

    async def update_status(
        self,
        reservation_id: str,
        status: ReservationStatus,
        updated_at: datetime,
        rejected_by: str | None = None,
        rejection_reason: str | None = None,
    ) -> Reservation | None:
        reservation = self.reservations.get(reservation_id)
        if reservation is None:
            return None
        if status == ReservationStatus.REJECTED:
            reservation.reject(updated_at, rejected_by=rejected_by, reason=rejection_reason)
        else:
            reservation.status = status
            reservation.updated_at = updated_at
        self.update_count += 1
        return replace(reservation)

    async def list_reservations(self, filters: ReservationFilter) -> list[Reservation]:
        if self.list_error:
            raise PersistenceError("fetch reservations", self.list_error)
        rows = [
            r
            for r in self.reservations.values()
            if (not filters.user_id or r.user_id == filters.user_id)
            and (not filters.status or r.status.value == filters.status)
        ]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return [replace(r) for r in rows]

    async def get_contract_by_reservation(self, reservation_id: str) -> Contract | None:
        if reservation_id in self.contract_errors:
            raise self.contract_errors[reservation_id]
        return self.contracts.get(reservation_id)

    async def list_payment_schedules(self, contract_id: str) -> list[PaymentSchedule]:
        if contract_id in self.schedule_errors:
            raise self.schedule_errors[contract_id]
        return sorted(self.schedules.get(contract_id, []), key=lambda s: s.installment_number)

    async def get_property_info(self, property_id: str) -> PropertyInfo | None:
        return self.properties.get(property_id)

    async def ping(self) -> None:
        return None
