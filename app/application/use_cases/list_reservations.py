import asyncio
import logging

from app.application.dtos.reservation_dto import EnrichedReservation, ReservationListing
from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.domain.entities import Contract, PaymentSchedule, PropertyInfo, Reservation

DEFAULT_CONCURRENCY = 10


class ListReservationsUseCase:
    """
    Lista reservaciones y las enriquece con contrato, calendario de pagos y precios.

    La consulta principal aborta todo el listado si falla. Cada enriquecimiento
    por reservación corre de forma concurrente (acotada por un semáforo) y una
    falla en él degrada solo a esa reservación; el orden de salida es el de la
    consulta principal.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        max_concurrency: int = DEFAULT_CONCURRENCY,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._reservation_repo = reservation_repo
        self._max_concurrency = max_concurrency
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        user_id: str | None = None,
        status: str | None = None,
    ) -> ReservationListing:
        filters = ReservationFilter(user_id=user_id or None, status=status or None)
        reservations = await self._reservation_repo.list_reservations(filters)

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(reservation: Reservation) -> EnrichedReservation:
            async with semaphore:
                return await self._enrich(reservation)

        items = await asyncio.gather(*(bounded(r) for r in reservations))
        self._logger.info(
            "Reservations listed",
            extra={"user_id": user_id, "status": status, "total": len(items)},
        )
        return ReservationListing(items=list(items))

    async def _enrich(self, reservation: Reservation) -> EnrichedReservation:
        contract = await self._find_contract(reservation)
        schedules = None
        if contract is not None:
            schedules = await self._find_schedules(reservation, contract)
        return EnrichedReservation(
            reservation=reservation,
            contract=contract,
            payment_schedules=schedules,
            property_info=await self._find_property_info(reservation),
        )

    async def _find_contract(self, reservation: Reservation) -> Contract | None:
        try:
            return await self._reservation_repo.get_contract_by_reservation(
                reservation.reservation_id
            )
        except Exception:
            self._logger.warning(
                "Contract lookup failed, listing reservation without contract",
                exc_info=True,
                extra={"reservation_id": reservation.reservation_id},
            )
            return None

    async def _find_schedules(
        self, reservation: Reservation, contract: Contract
    ) -> list[PaymentSchedule]:
        try:
            schedules = await self._reservation_repo.list_payment_schedules(
                contract.contract_id
            )
        except Exception:
            self._logger.warning(
                "Payment schedule lookup failed, listing contract without installments",
                exc_info=True,
                extra={
                    "reservation_id": reservation.reservation_id,
                    "contract_id": contract.contract_id,
                },
            )
            return []
        return sorted(schedules or [], key=lambda s: s.installment_number)

    async def _find_property_info(self, reservation: Reservation) -> PropertyInfo | None:
        try:
            return await self._reservation_repo.get_property_info(reservation.property_id)
        except Exception:
            self._logger.warning(
                "Property info lookup failed",
                exc_info=True,
                extra={"reservation_id": reservation.reservation_id},
            )
            return None
