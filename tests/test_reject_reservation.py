from datetime import datetime, timezone

import pytest

from app.application.use_cases.reject_reservation import RejectReservationUseCase
from app.domain.entities import Reservation, ReservationStatus
from app.domain.errors import PersistenceError, ReservationNotFoundError, ValidationError

CREATED_AT = datetime(2026, 2, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def use_case(repo, clock):
    return RejectReservationUseCase(reservation_repo=repo, clock=clock)


@pytest.fixture
def pending(repo) -> Reservation:
    reservation = Reservation(
        reservation_id="R123",
        tracking_number="TRK-AB12CD34",
        property_id="PROP-001",
        user_id="user-123",
        status=ReservationStatus.PENDING,
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
    repo.reservations[reservation.reservation_id] = reservation
    return reservation


async def test_rejects_pending_reservation(use_case, repo, pending, clock):
    result = await use_case.execute("R123")

    assert result.status == ReservationStatus.REJECTED
    assert result.updated_at == clock.now()
    assert result.created_at == CREATED_AT
    assert repo.reservations["R123"].status == ReservationStatus.REJECTED
    assert repo.reservations["R123"].rejected_by is None


async def test_records_who_rejected_and_why(use_case, repo, pending):
    result = await use_case.execute("R123", rejected_by="admin-7", reason="Incomplete documents")

    assert result.rejected_by == "admin-7"
    assert result.rejection_reason == "Incomplete documents"


async def test_rejecting_twice_refreshes_timestamp(use_case, repo, pending, clock):
    await use_case.execute("R123")
    clock.advance(hours=2)

    result = await use_case.execute("R123")

    assert result.status == ReservationStatus.REJECTED
    assert result.updated_at == clock.now()
    assert repo.update_count == 2


async def test_unknown_reservation_is_a_persistence_error(use_case, repo):
    with pytest.raises(ReservationNotFoundError) as exc_info:
        await use_case.execute("does-not-exist")

    assert isinstance(exc_info.value, PersistenceError)
    assert exc_info.value.message == "Failed to reject reservation: Reservation not found: does-not-exist"
    assert repo.update_count == 0


@pytest.mark.parametrize("reservation_id", [None, "", "   "])
async def test_reservation_id_is_required(use_case, repo, reservation_id):
    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute(reservation_id)

    assert exc_info.value.message == "Reservation ID is required"
    assert exc_info.value.error == "Missing reservation ID"
    assert repo.update_count == 0
