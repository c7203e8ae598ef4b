from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

metadata = MetaData()

property_reservations = Table(
    "property_reservations",
    metadata,
    Column("reservation_id", String(36), primary_key=True),
    Column("tracking_number", String(16), nullable=False, unique=True),
    Column("property_id", String(64), nullable=False, index=True),
    Column("property_title", String(255)),
    Column("reservation_fee", Numeric(12, 2), nullable=False, default=0),
    Column("user_id", String(64), nullable=False, index=True),
    Column("client_name", String(255)),
    Column("client_email", String(255)),
    Column("client_phone", String(50), nullable=False),
    Column("client_address", String(500), nullable=False),
    Column("occupation", String(150), nullable=False),
    Column("employer", String(255), nullable=False),
    Column("employment_status", String(50), nullable=False),
    Column("years_employed", Integer, nullable=False),
    Column("monthly_income", Numeric(12, 2), nullable=False),
    Column("other_income_source", String(255)),
    Column("other_income_amount", Numeric(12, 2)),
    Column("total_monthly_income", Numeric(12, 2)),
    Column("message", Text),
    Column("id_type", String(50)),
    Column("id_upload_path", String(1024)),
    Column("status", String(16), nullable=False, default="pending", index=True),
    Column("rejected_by", String(64)),
    Column("rejection_reason", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

property_contracts = Table(
    "property_contracts",
    metadata,
    Column("contract_id", String(36), primary_key=True),
    Column("reservation_id", String(36), nullable=False, index=True),
    Column("contract_number", String(50), nullable=False),
    Column("payment_plan_months", Integer, nullable=False),
    Column("monthly_installment", Numeric(12, 2), nullable=False),
    Column("contract_status", String(32), nullable=False),
)

contract_payment_schedules = Table(
    "contract_payment_schedules",
    metadata,
    Column("schedule_id", String(36), primary_key=True),
    Column("contract_id", String(36), nullable=False, index=True),
    Column("installment_number", Integer, nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("due_date", Date, nullable=False),
    Column("is_paid", Boolean, nullable=False, default=False),
)

property_info = Table(
    "property_info_tbl",
    metadata,
    Column("property_id", String(64), primary_key=True),
    Column("property_price", Numeric(14, 2)),
    Column("property_downprice", Numeric(14, 2)),
)
