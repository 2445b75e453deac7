from __future__ import annotations

from fastapi import APIRouter, Depends

from salon_booking.api.schemas import BookingSchema, PaymentSuccessResponseSchema
from salon_booking.application.dto.payment_event import PaymentSuccessDTO
from salon_booking.application.use_cases.booking_service import BookingService
from salon_booking.wiring.dependencies import get_booking_service

router = APIRouter(prefix="/api/bookings/payments")


@router.post("/success", response_model=PaymentSuccessResponseSchema)
def payment_success(
    event: PaymentSuccessDTO,
    service: BookingService = Depends(get_booking_service),
):
    # Late or duplicate callbacks for unknown bookings are acknowledged with an empty body.
    booking = service.on_payment_success(event.booking_id, event.payment_status)
    return PaymentSuccessResponseSchema(booking=BookingSchema.from_entity(booking) if booking else None)
