"""
Integration tests del repositorio SQL de reservaciones.

Usa SQLite (aiosqlite) en un archivo temporal; cada operación del
repositorio abre su propia sesión, igual que en producción.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import insert

from app.application.interfaces.reservation_repo import ReservationFilter
from app.application.use_cases.list_reservations import ListReservationsUseCase
from app.domain.entities import Reservation, ReservationStatus
from app.domain.errors import PersistenceError
from app.infrastructure.db.engine import session_scope
from app.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from app.infrastructure.db.tables import (
    contract_payment_schedules,
    property_contracts,
    property_info,
)


def make_reservation(tracking_number: str, hour: int = 9, user_id: str = "user-123") -> Reservation:
    created_at = datetime(2026, 3, 1, hour, 0, tzinfo=timezone.utc)
    return Reservation(
        tracking_number=tracking_number,
        property_id="PROP-001",
        property_title="Unit 12",
        reservation_fee=Decimal("5000.00"),
        user_id=user_id,
        client_phone="+639171234567",
        client_address="Quezon City",
        occupation="Engineer",
        employer="Acme",
        employment_status="regular",
        years_employed=4,
        monthly_income=Decimal("85000.00"),
        status=ReservationStatus.PENDING,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def sql_repo(sql_session_maker) -> ReservationRepoSQL:
    return ReservationRepoSQL(sql_session_maker)


class TestReservationRepoSQL:
    async def test_create_assigns_id_and_round_trips(self, sql_repo):
        saved = await sql_repo.create_reservation(make_reservation("TRK-AAAA0001"))

        assert saved.reservation_id

        (loaded,) = await sql_repo.list_reservations(ReservationFilter())
        assert loaded.reservation_id == saved.reservation_id
        assert loaded.tracking_number == "TRK-AAAA0001"
        assert loaded.status == ReservationStatus.PENDING
        assert loaded.monthly_income == Decimal("85000.00")
        assert loaded.years_employed == 4
        assert loaded.id_upload_path is None

    async def test_duplicate_tracking_number_raises_persistence_error(self, sql_repo):
        await sql_repo.create_reservation(make_reservation("TRK-DUPE0001"))

        with pytest.raises(PersistenceError) as exc_info:
            await sql_repo.create_reservation(make_reservation("TRK-DUPE0001"))

        assert exc_info.value.operation == "create reservation"
        assert "UNIQUE" in exc_info.value.detail.upper()

    async def test_update_status_records_rejection(self, sql_repo):
        saved = await sql_repo.create_reservation(make_reservation("TRK-REJ00001"))
        rejected_at = datetime(2026, 3, 2, 10, 30, tzinfo=timezone.utc)

        updated = await sql_repo.update_status(
            saved.reservation_id,
            ReservationStatus.REJECTED,
            updated_at=rejected_at,
            rejected_by="admin-1",
            rejection_reason="Incomplete",
        )

        assert updated.status == ReservationStatus.REJECTED
        assert updated.rejected_by == "admin-1"
        assert updated.rejection_reason == "Incomplete"
        assert updated.updated_at.replace(tzinfo=None) == rejected_at.replace(tzinfo=None)

    async def test_update_status_unknown_returns_none(self, sql_repo):
        result = await sql_repo.update_status(
            "missing",
            ReservationStatus.REJECTED,
            updated_at=datetime(2026, 3, 2, tzinfo=timezone.utc),
        )
        assert result is None

    async def test_list_filters_and_orders_newest_first(self, sql_repo):
        first = await sql_repo.create_reservation(make_reservation("TRK-LIST0001", hour=8))
        second = await sql_repo.create_reservation(make_reservation("TRK-LIST0002", hour=11))
        await sql_repo.create_reservation(make_reservation("TRK-LIST0003", hour=10, user_id="other"))
        await sql_repo.update_status(
            first.reservation_id,
            ReservationStatus.REJECTED,
            updated_at=datetime(2026, 3, 2, tzinfo=timezone.utc),
        )

        everything = await sql_repo.list_reservations(ReservationFilter())
        mine = await sql_repo.list_reservations(ReservationFilter(user_id="user-123"))
        mine_pending = await sql_repo.list_reservations(
            ReservationFilter(user_id="user-123", status="pending")
        )

        assert [r.tracking_number for r in everything] == [
            "TRK-LIST0002",
            "TRK-LIST0003",
            "TRK-LIST0001",
        ]
        assert {r.reservation_id for r in mine} == {first.reservation_id, second.reservation_id}
        assert [r.reservation_id for r in mine_pending] == [second.reservation_id]

    async def test_contract_schedules_and_property_info(self, sql_repo, sql_session_maker):
        saved = await sql_repo.create_reservation(make_reservation("TRK-CONT0001"))
        async with session_scope(sql_session_maker) as session:
            await session.execute(
                insert(property_contracts).values(
                    contract_id="C1",
                    reservation_id=saved.reservation_id,
                    contract_number="CN-0001",
                    payment_plan_months=3,
                    monthly_installment=Decimal("1500.00"),
                    contract_status="active",
                )
            )
            await session.execute(
                insert(contract_payment_schedules),
                [
                    {
                        "schedule_id": f"S{n}",
                        "contract_id": "C1",
                        "installment_number": n,
                        "amount": Decimal("1500.00"),
                        "due_date": date(2026, 3 + n, 1),
                        "is_paid": n == 1,
                    }
                    for n in (2, 3, 1)
                ],
            )
            await session.execute(
                insert(property_info).values(
                    property_id="PROP-001",
                    property_price=Decimal("2500000.00"),
                    property_downprice=Decimal("250000.00"),
                )
            )

        contract = await sql_repo.get_contract_by_reservation(saved.reservation_id)
        schedules = await sql_repo.list_payment_schedules("C1")
        info = await sql_repo.get_property_info("PROP-001")

        assert contract.contract_number == "CN-0001"
        assert [s.installment_number for s in schedules] == [1, 2, 3]
        assert schedules[0].is_paid is True
        assert schedules[0].due_date == date(2026, 4, 1)
        assert info.property_downprice == Decimal("250000.00")

        listing = await ListReservationsUseCase(sql_repo).execute(user_id="user-123")
        item = listing.items[0]
        assert item.contract.contract_id == "C1"
        assert [s.schedule_id for s in item.payment_schedules] == ["S1", "S2", "S3"]

    async def test_missing_contract_and_property(self, sql_repo):
        assert await sql_repo.get_contract_by_reservation("nope") is None
        assert await sql_repo.list_payment_schedules("nope") == []
        assert await sql_repo.get_property_info("nope") is None

    async def test_ping(self, sql_repo):
        await sql_repo.ping()
