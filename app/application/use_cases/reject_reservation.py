import logging

from app.application.interfaces.clock import Clock
from app.application.interfaces.reservation_repo import ReservationRepo
from app.domain.entities import Reservation, ReservationStatus
from app.domain.errors import ReservationNotFoundError, ValidationError


class RejectReservationUseCase:
    """
    Mueve una reservación al estado terminal ``rejected``.

    Es idempotente en efecto: rechazar de nuevo vuelve a marcar el timestamp.
    No protege contra transiciones concurrentes en conflicto.
    """

    def __init__(self, reservation_repo: ReservationRepo, clock: Clock) -> None:
        self._reservation_repo = reservation_repo
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        reservation_id: str | None,
        rejected_by: str | None = None,
        reason: str | None = None,
    ) -> Reservation:
        if reservation_id is None or not str(reservation_id).strip():
            raise ValidationError(
                field="reservation_id",
                message="Reservation ID is required",
                error="Missing reservation ID",
            )
        reservation_id = str(reservation_id).strip()
        self._logger.info("Rejecting reservation", extra={"reservation_id": reservation_id})

        updated = await self._reservation_repo.update_status(
            reservation_id,
            ReservationStatus.REJECTED,
            updated_at=self._clock.now(),
            rejected_by=rejected_by,
            rejection_reason=reason,
        )
        if updated is None:
            raise ReservationNotFoundError(reservation_id, operation="reject reservation")

        self._logger.info("Reservation rejected", extra={"reservation_id": reservation_id})
        return updated
