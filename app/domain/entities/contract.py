"""Contratos y calendarios de pago (propiedad de otro subsistema, solo lectura)."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Contract:
    """Contrato generado a partir de una reservación aprobada."""

    contract_id: str
    contract_number: str
    payment_plan_months: int
    monthly_installment: Decimal
    contract_status: str


@dataclass
class PaymentSchedule:
    """Una cuota del calendario de pagos de un contrato."""

    schedule_id: str
    contract_id: str
    installment_number: int
    amount: Decimal
    due_date: date
    is_paid: bool = False


@dataclass
class PropertyInfo:
    """Precios de la propiedad reservada."""

    property_id: str
    property_price: Decimal | None = None
    property_downprice: Decimal | None = None
