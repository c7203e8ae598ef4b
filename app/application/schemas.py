from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class ReservationPayload(BaseModel):
    """JSON-encoded reservation fields sent in the multipart ``reservation_data`` part.

    Every field is optional here; required-field checks happen in the intake
    use case so that missing values are reported as a single validation error.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    property_id: str | None = None
    property_title: str | None = None
    reservation_fee: Decimal | None = None
    user_id: str | None = None
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str | None = None
    client_address: str | None = None
    occupation: str | None = None
    employer: str | None = None
    employment_status: str | None = None
    years_employed: int | None = None
    monthly_income: Decimal | None = None
    other_income_source: str | None = None
    other_income_amount: Decimal | None = None
    total_monthly_income: Decimal | None = None
    message: str | None = None
