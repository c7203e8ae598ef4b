import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy import insert, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.domain.entities import (
    Contract,
    PaymentSchedule,
    PropertyInfo,
    Reservation,
    ReservationStatus,
)
from app.domain.errors import PersistenceError
from app.infrastructure.db.engine import session_scope
from app.infrastructure.db.tables import (
    contract_payment_schedules,
    property_contracts,
    property_info,
    property_reservations,
)

logger = logging.getLogger(__name__)

_WRITABLE_COLUMNS = {c.name for c in property_reservations.columns}


def _store_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _to_reservation(row: Any) -> Reservation:
    return Reservation(
        reservation_id=row["reservation_id"],
        tracking_number=row["tracking_number"],
        property_id=row["property_id"],
        property_title=row["property_title"],
        reservation_fee=row["reservation_fee"],
        user_id=row["user_id"],
        client_name=row["client_name"],
        client_email=row["client_email"],
        client_phone=row["client_phone"],
        client_address=row["client_address"],
        occupation=row["occupation"],
        employer=row["employer"],
        employment_status=row["employment_status"],
        years_employed=row["years_employed"],
        monthly_income=row["monthly_income"],
        other_income_source=row["other_income_source"],
        other_income_amount=row["other_income_amount"],
        total_monthly_income=row["total_monthly_income"],
        message=row["message"],
        id_type=row["id_type"],
        id_upload_path=row["id_upload_path"],
        status=ReservationStatus(row["status"]),
        rejected_by=row["rejected_by"],
        rejection_reason=row["rejection_reason"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class ReservationRepoSQL(ReservationRepo):
    """
    Reservation store backed by SQLAlchemy Core.

    Each call opens its own short-lived session so that listing enrichment can
    run sub-queries concurrently without sharing an AsyncSession.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def create_reservation(self, reservation: Reservation) -> Reservation:
        saved = replace(
            reservation,
            reservation_id=reservation.reservation_id or str(uuid.uuid4()),
        )
        values = {k: v for k, v in vars(saved).items() if k in _WRITABLE_COLUMNS}
        values["status"] = saved.status.value
        try:
            async with session_scope(self._session_maker) as session:
                await session.execute(insert(property_reservations).values(values))
        except SQLAlchemyError as exc:
            logger.error(
                "Reservation insert failed",
                extra={"tracking_number": saved.tracking_number, "error": _store_message(exc)},
            )
            raise PersistenceError("create reservation", _store_message(exc)) from exc
        return saved

    async def update_status(
        self,
        reservation_id: str,
        status: ReservationStatus,
        updated_at: datetime,
        rejected_by: str | None = None,
        rejection_reason: str | None = None,
    ) -> Reservation | None:
        values: dict[str, Any] = {"status": status.value, "updated_at": updated_at}
        if rejected_by is not None:
            values["rejected_by"] = rejected_by
        if rejection_reason is not None:
            values["rejection_reason"] = rejection_reason
        stmt = (
            update(property_reservations)
            .where(property_reservations.c.reservation_id == reservation_id)
            .values(**values)
        )
        try:
            async with session_scope(self._session_maker) as session:
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    return None
                row = (
                    await session.execute(
                        select(property_reservations).where(
                            property_reservations.c.reservation_id == reservation_id
                        )
                    )
                ).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("update reservation status", _store_message(exc)) from exc
        return _to_reservation(row) if row else None

    async def list_reservations(self, filters: ReservationFilter) -> list[Reservation]:
        stmt = select(property_reservations)
        if filters.user_id:
            stmt = stmt.where(property_reservations.c.user_id == filters.user_id)
        if filters.status:
            stmt = stmt.where(property_reservations.c.status == filters.status)
        stmt = stmt.order_by(property_reservations.c.created_at.desc())
        try:
            async with self._session_maker() as session:
                rows = (await session.execute(stmt)).mappings().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("fetch reservations", _store_message(exc)) from exc
        return [_to_reservation(row) for row in rows]

    async def get_contract_by_reservation(self, reservation_id: str) -> Contract | None:
        stmt = (
            select(property_contracts)
            .where(property_contracts.c.reservation_id == reservation_id)
            .limit(1)
        )
        try:
            async with self._session_maker() as session:
                row = (await session.execute(stmt)).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("fetch contract", _store_message(exc)) from exc
        if not row:
            return None
        return Contract(
            contract_id=row["contract_id"],
            contract_number=row["contract_number"],
            payment_plan_months=row["payment_plan_months"],
            monthly_installment=row["monthly_installment"],
            contract_status=row["contract_status"],
        )

    async def list_payment_schedules(self, contract_id: str) -> list[PaymentSchedule]:
        stmt = (
            select(contract_payment_schedules)
            .where(contract_payment_schedules.c.contract_id == contract_id)
            .order_by(contract_payment_schedules.c.installment_number.asc())
        )
        try:
            async with self._session_maker() as session:
                rows = (await session.execute(stmt)).mappings().all()
        except SQLAlchemyError as exc:
            raise PersistenceError("fetch payment schedules", _store_message(exc)) from exc
        return [
            PaymentSchedule(
                schedule_id=row["schedule_id"],
                contract_id=row["contract_id"],
                installment_number=row["installment_number"],
                amount=row["amount"],
                due_date=row["due_date"],
                is_paid=bool(row["is_paid"]),
            )
            for row in rows
        ]

    async def get_property_info(self, property_id: str) -> PropertyInfo | None:
        stmt = select(property_info).where(property_info.c.property_id == property_id).limit(1)
        try:
            async with self._session_maker() as session:
                row = (await session.execute(stmt)).mappings().first()
        except SQLAlchemyError as exc:
            raise PersistenceError("fetch property info", _store_message(exc)) from exc
        if not row:
            return None
        return PropertyInfo(
            property_id=row["property_id"],
            property_price=row["property_price"],
            property_downprice=row["property_downprice"],
        )

    async def ping(self) -> None:
        async with self._session_maker() as session:
            (await session.execute(text("SELECT 1"))).scalar()
