import logging
from decimal import Decimal
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.application.schemas import ReservationPayload
from app.application.interfaces.clock import Clock
from app.application.interfaces.object_storage import ObjectStorage, UploadedFile
from app.application.interfaces.reservation_repo import ReservationRepo
from app.application.interfaces.tracking_number_generator import TrackingNumberGenerator
from app.domain.constants import ID_DOCUMENT_BUCKET, ID_DOCUMENT_FOLDER
from app.domain.entities import Reservation, ReservationStatus
from app.domain.errors import (
    InvalidIncomeError,
    InvalidYearsEmployedError,
    MissingRequiredFieldsError,
    UploadFailedError,
    ValidationError,
)
from app.domain.value_objects import ID_DOCUMENT_POLICY, UploadPolicy, validate_file

REQUIRED_FIELDS = (
    "property_id",
    "user_id",
    "client_phone",
    "client_address",
    "occupation",
    "employer",
    "employment_status",
    "years_employed",
    "monthly_income",
)


def parse_reservation_data(raw: str | bytes | dict[str, Any] | None) -> ReservationPayload:
    """Parse the JSON-encoded ``reservation_data`` form part."""
    if raw is None or raw == "" or raw == b"":
        return ReservationPayload()
    try:
        if isinstance(raw, dict):
            return ReservationPayload.model_validate(raw)
        return ReservationPayload.model_validate_json(raw)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "reservation_data"
        raise ValidationError(
            field=field,
            message=f"Invalid reservation data: {field}: {first.get('msg')}",
        ) from exc


def _missing_fields(payload: ReservationPayload) -> list[str]:
    missing = []
    for name in REQUIRED_FIELDS:
        value = getattr(payload, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


class CreateReservationUseCase:
    """
    Pipeline de alta: validación -> carga opcional -> número de seguimiento -> persistencia.

    Ninguna validación fallida produce escrituras; si la inserción falla
    después de subir el documento, el objeto subido se elimina.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        object_storage: ObjectStorage,
        tracking_number_generator: TrackingNumberGenerator,
        clock: Clock,
        bucket: str = ID_DOCUMENT_BUCKET,
        folder: str = ID_DOCUMENT_FOLDER,
        upload_policy: UploadPolicy = ID_DOCUMENT_POLICY,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._object_storage = object_storage
        self._tracking_number_generator = tracking_number_generator
        self._clock = clock
        self._bucket = bucket
        self._folder = folder
        self._upload_policy = upload_policy
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        reservation_data: str | bytes | dict[str, Any] | None,
        id_file: UploadedFile | None = None,
        id_type: str | None = None,
    ) -> Reservation:
        payload = parse_reservation_data(reservation_data)
        self._logger.info(
            "Reservation submission received",
            extra={
                "property_id": payload.property_id,
                "user_id": payload.user_id,
                "has_id_file": bool(id_file and not id_file.is_empty),
                "id_type": id_type,
            },
        )

        missing = _missing_fields(payload)
        if missing:
            raise MissingRequiredFieldsError(missing)
        if payload.monthly_income <= 0:
            raise InvalidIncomeError()
        if payload.years_employed < 0:
            raise InvalidYearsEmployedError()

        document = id_file if id_file is not None and not id_file.is_empty else None
        if document is not None:
            validate_file(document.describe(), self._upload_policy)

        id_upload_path = None
        object_key = None
        if document is not None:
            result = await self._object_storage.upload(
                document, bucket=self._bucket, folder=self._folder, name=None
            )
            if not result.success:
                self._logger.error(
                    "ID file upload failed",
                    extra={"bucket": self._bucket, "error": result.error},
                )
                raise UploadFailedError(result.error or "unknown storage error")
            id_upload_path = result.public_url
            object_key = result.object_key
            self._logger.info("ID file uploaded", extra={"object_key": object_key})

        tracking_number = self._tracking_number_generator.generate()
        self._logger.info("Tracking number generated", extra={"tracking_number": tracking_number})

        now = self._clock.now()
        reservation = Reservation(
            tracking_number=tracking_number,
            property_id=payload.property_id,
            property_title=payload.property_title or None,
            reservation_fee=payload.reservation_fee or Decimal("0"),
            user_id=payload.user_id,
            client_name=payload.client_name,
            client_email=payload.client_email,
            client_phone=payload.client_phone.strip(),
            client_address=payload.client_address.strip(),
            occupation=payload.occupation.strip(),
            employer=payload.employer.strip(),
            employment_status=payload.employment_status,
            years_employed=payload.years_employed,
            monthly_income=payload.monthly_income,
            other_income_source=payload.other_income_source,
            other_income_amount=payload.other_income_amount,
            total_monthly_income=payload.total_monthly_income,
            message=payload.message,
            id_type=id_type or None,
            id_upload_path=id_upload_path,
            status=ReservationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        try:
            saved = await self._reservation_repo.create_reservation(reservation)
        except Exception:
            if object_key is not None:
                await self._discard_upload(object_key)
            raise

        self._logger.info(
            "Reservation created",
            extra={
                "reservation_id": saved.reservation_id,
                "tracking_number": saved.tracking_number,
            },
        )
        return saved

    async def _discard_upload(self, object_key: str) -> None:
        try:
            await self._object_storage.remove(self._bucket, object_key)
        except Exception:
            self._logger.exception(
                "Could not remove uploaded ID file after failed insert",
                extra={"bucket": self._bucket, "object_key": object_key},
            )
