"""Entidad Reservation - Agregado raíz del dominio."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from app.domain.constants import (
    RESERVATION_STATUS_APPROVED,
    RESERVATION_STATUS_PENDING,
    RESERVATION_STATUS_REJECTED,
)


class ReservationStatus(str, Enum):
    """Estados posibles de una reservación."""

    PENDING = RESERVATION_STATUS_PENDING
    APPROVED = RESERVATION_STATUS_APPROVED
    REJECTED = RESERVATION_STATUS_REJECTED


@dataclass
class Reservation:
    """
    Entidad principal del dominio - Agregado Raíz.

    Representa la solicitud de un cliente para apartar una propiedad
    mientras se convierte en contrato.
    """

    # Identificadores
    reservation_id: str | None = None
    tracking_number: str | None = None

    # Propiedad
    property_id: str = ""
    property_title: str | None = None
    reservation_fee: Decimal = Decimal("0")

    # Cliente
    user_id: str = ""
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str = ""
    client_address: str = ""

    # Empleo
    occupation: str = ""
    employer: str = ""
    employment_status: str = ""
    years_employed: int = 0

    # Ingresos
    monthly_income: Decimal = Decimal("0")
    other_income_source: str | None = None
    other_income_amount: Decimal | None = None
    total_monthly_income: Decimal | None = None

    message: str | None = None

    # Documento de identidad
    id_type: str | None = None
    id_upload_path: str | None = None

    status: ReservationStatus = ReservationStatus.PENDING

    # Auditoría de rechazo
    rejected_by: str | None = None
    rejection_reason: str | None = None

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_rejected(self) -> bool:
        """El rechazo es terminal: ninguna operación lo revierte."""
        return self.status == ReservationStatus.REJECTED

    def reject(
        self,
        rejected_at: datetime,
        rejected_by: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Marca la reservación como rechazada y actualiza el timestamp."""
        self.status = ReservationStatus.REJECTED
        self.updated_at = rejected_at
        if rejected_by is not None:
            self.rejected_by = rejected_by
        if reason is not None:
            self.rejection_reason = reason
