from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from salon_booking.api.errors import to_http_error
from salon_booking.api.schemas import (
    BookedSlotSchema,
    BookingRequestSchema,
    BookingSchema,
    CustomerBookingsSchema,
    SalonReportSchema,
)
from salon_booking.application.exceptions import BookingError, UpstreamServiceError
from salon_booking.application.use_cases.booking_service import BookingService
from salon_booking.domain.entities.booking import BookingStatus
from salon_booking.wiring.dependencies import get_booking_service

router = APIRouter(prefix="/api/bookings")
logger = logging.getLogger(__name__)


@router.post("", response_model=BookingSchema, status_code=201)
def create_booking(
    req: BookingRequestSchema,
    salon_id: str = Query(...),
    authorization: str = Header(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        customer = service.current_customer(authorization)
        if customer is None:
            raise HTTPException(status_code=401, detail="Unknown user")
        booking = service.create_booking(
            customer_id=customer.id,
            salon_id=salon_id,
            start=req.start_time,
            service_ids=[str(s) for s in req.service_ids],
            token=authorization,
        )
    except (BookingError, UpstreamServiceError) as e:
        logger.info("Booking rejected", extra={"salon_id": salon_id, "reason": str(e)})
        raise to_http_error(e)

    return BookingSchema.from_entity(booking)


@router.get("/customer", response_model=CustomerBookingsSchema)
def get_bookings_by_customer(
    authorization: str = Header(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        customer = service.current_customer(authorization)
    except UpstreamServiceError as e:
        raise to_http_error(e)
    if customer is None:
        raise HTTPException(status_code=401, detail="Unknown user")

    bookings = [BookingSchema.from_entity(b) for b in service.get_bookings_by_customer(customer.id)]
    return CustomerBookingsSchema(bookings=bookings, total_bookings=len(bookings))


@router.get("/salon", response_model=list[BookingSchema])
def get_bookings_by_salon(
    authorization: str = Header(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        salon = service.salon_for_owner(authorization)
    except UpstreamServiceError as e:
        raise to_http_error(e)
    if salon is None:
        logger.info("Caller owns no salon", extra={"reason": "no_salon"})
        return []
    return [BookingSchema.from_entity(b) for b in service.get_bookings_by_salon(salon.id)]


@router.get("/report", response_model=SalonReportSchema)
def get_salon_report(
    authorization: str = Header(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        salon = service.salon_for_owner(authorization)
    except UpstreamServiceError as e:
        raise to_http_error(e)
    if salon is None:
        logger.info("Caller owns no salon, returning empty report", extra={"reason": "no_salon"})
        return SalonReportSchema()
    return SalonReportSchema.from_entity(service.get_salon_report(salon.id, salon=salon))


@router.get("/slots/salon/{salon_id}/date/{day}", response_model=list[BookedSlotSchema])
def get_booked_slots(
    salon_id: str,
    day: date,
    service: BookingService = Depends(get_booking_service),
):
    return [
        BookedSlotSchema(start_time=b.start_time, end_time=b.end_time)
        for b in service.get_bookings_by_date(salon_id, day)
    ]


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking_by_id(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
):
    try:
        booking = service.get_booking_by_id(booking_id)
    except BookingError as e:
        raise to_http_error(e)
    return BookingSchema.from_entity(booking)


@router.put("/{booking_id}/status", response_model=BookingSchema)
def update_booking_status(
    booking_id: str,
    status: BookingStatus = Query(...),
    service: BookingService = Depends(get_booking_service),
):
    try:
        booking = service.update_status(booking_id, status)
    except BookingError as e:
        raise to_http_error(e)
    return BookingSchema.from_entity(booking)
