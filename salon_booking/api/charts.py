from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header

from salon_booking.api.errors import to_http_error
from salon_booking.api.schemas import BookingCountPointSchema, EarningsPointSchema
from salon_booking.application.exceptions import UpstreamServiceError
from salon_booking.application.use_cases.booking_service import BookingService
from salon_booking.wiring.dependencies import get_booking_service

router = APIRouter(prefix="/api/bookings/chart")
logger = logging.getLogger(__name__)


@router.get("/earnings", response_model=list[EarningsPointSchema])
def get_earnings_chart(
    authorization: str = Header(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        salon = service.salon_for_owner(authorization)
    except UpstreamServiceError as e:
        raise to_http_error(e)
    if salon is None:
        return []
    return [EarningsPointSchema.from_point(p) for p in service.get_earnings_series(salon.id)]


@router.get("/bookings", response_model=list[BookingCountPointSchema])
def get_booking_count_chart(
    authorization: str = Header(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        salon = service.salon_for_owner(authorization)
    except UpstreamServiceError as e:
        raise to_http_error(e)
    if salon is None:
        return []
    return [BookingCountPointSchema.from_point(p) for p in service.get_booking_count_series(salon.id)]
