from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

Money = Decimal


class RejectReservationRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    reservation_id: str | None = None
    rejected_by: str | None = None
    reason: str | None = None


class ContractOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    contract_id: str
    contract_number: str
    payment_plan_months: int
    monthly_installment: Money
    contract_status: str


class PaymentScheduleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    schedule_id: str
    contract_id: str
    installment_number: int
    amount: Money
    due_date: date
    is_paid: bool


class PropertyInfoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    property_price: Money | None = None
    property_downprice: Money | None = None


class ReservationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservation_id: str
    tracking_number: str
    property_id: str
    property_title: str | None = None
    reservation_fee: Money
    user_id: str
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str
    client_address: str
    occupation: str
    employer: str
    employment_status: str
    years_employed: int
    monthly_income: Money
    other_income_source: str | None = None
    other_income_amount: Money | None = None
    total_monthly_income: Money | None = None
    message: str | None = None
    id_type: str | None = None
    id_upload_path: str | None = None
    status: str
    rejected_by: str | None = None
    rejection_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EnrichedReservationOut(ReservationOut):
    property_info: PropertyInfoOut | None = None
    contract: ContractOut | None = None
    payment_schedules: list[PaymentScheduleOut] | None = None


class ReservationResponse(BaseModel):
    success: bool = True
    data: ReservationOut
    message: str


class ReservationListResponse(BaseModel):
    success: bool = True
    data: list[EnrichedReservationOut] = Field(default_factory=list)
    total: int
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
    error_id: str | None = None
