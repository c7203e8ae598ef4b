from dataclasses import asdict

from fastapi import APIRouter, Body, Depends, File, Form, Query, UploadFile, status

from app.api.dependencies import get_use_cases
from app.api.schemas.reservations import (
    EnrichedReservationOut,
    RejectReservationRequest,
    ReservationListResponse,
    ReservationOut,
    ReservationResponse,
)
from app.application.dtos.reservation_dto import EnrichedReservation
from app.application.interfaces.object_storage import UploadedFile
from app.domain.entities import Reservation

router = APIRouter()


def _reservation_fields(reservation: Reservation) -> dict:
    return asdict(reservation) | {"status": reservation.status.value}


def _to_out(reservation: Reservation) -> ReservationOut:
    return ReservationOut.model_validate(_reservation_fields(reservation))


def _to_enriched_out(item: EnrichedReservation) -> EnrichedReservationOut:
    schedules = item.payment_schedules
    return EnrichedReservationOut.model_validate(
        _reservation_fields(item.reservation)
        | {
            "property_info": asdict(item.property_info) if item.property_info else None,
            "contract": asdict(item.contract) if item.contract else None,
            "payment_schedules": (
                [asdict(s) for s in schedules] if schedules is not None else None
            ),
        }
    )


@router.post(
    "/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(
    reservation_data: str | None = Form(default=None),
    id_type: str | None = Form(default=None),
    id_file: UploadFile | None = File(default=None),
    use_cases=Depends(get_use_cases),
) -> ReservationResponse:
    uploaded = None
    if id_file is not None:
        uploaded = UploadedFile(
            filename=id_file.filename or "document",
            content_type=id_file.content_type,
            data=await id_file.read(),
        )
    reservation = await use_cases["create_reservation"].execute(
        reservation_data=reservation_data,
        id_file=uploaded,
        id_type=id_type,
    )
    return ReservationResponse(
        data=_to_out(reservation),
        message=(
            "Reservation submitted successfully! Our team will review your "
            "application and contact you soon."
        ),
    )


@router.get(
    "/reservations",
    response_model=ReservationListResponse,
    status_code=status.HTTP_200_OK,
)
async def list_reservations(
    user_id: str | None = Query(default=None, alias="userId"),
    status_filter: str | None = Query(default=None, alias="status"),
    use_cases=Depends(get_use_cases),
) -> ReservationListResponse:
    listing = await use_cases["list_reservations"].execute(
        user_id=user_id,
        status=status_filter,
    )
    return ReservationListResponse(
        data=[_to_enriched_out(item) for item in listing.items],
        total=listing.total,
        message=f"Found {listing.total} reservations",
    )


@router.post(
    "/reservations/reject",
    response_model=ReservationResponse,
    status_code=status.HTTP_200_OK,
)
async def reject_reservation(
    payload: RejectReservationRequest | None = Body(default=None),
    use_cases=Depends(get_use_cases),
) -> ReservationResponse:
    payload = payload or RejectReservationRequest()
    reservation = await use_cases["reject_reservation"].execute(
        reservation_id=payload.reservation_id,
        rejected_by=payload.rejected_by,
        reason=payload.reason,
    )
    return ReservationResponse(
        data=_to_out(reservation),
        message="Reservation rejected successfully!",
    )
