from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from salon_booking.domain.entities.booking import Booking, BookingStatus
from salon_booking.domain.entities.report import ChartPoint, SalonReport


class BookingRequestSchema(BaseModel):
    start_time: datetime
    service_ids: list[str | int] = Field(default_factory=list)

    @field_validator("start_time")
    @classmethod
    def _local_time_only(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError("start_time must be a salon-local time without UTC offset")
        return value


class BookingSchema(BaseModel):
    id: str
    customer_id: str
    salon_id: str
    start_time: datetime
    end_time: datetime
    service_ids: list[str]
    total_price: Decimal
    status: BookingStatus
    payment_status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id or "",
            customer_id=booking.customer_id,
            salon_id=booking.salon_id,
            start_time=booking.start_time,
            end_time=booking.end_time,
            service_ids=sorted(booking.service_ids),
            total_price=booking.total_price,
            status=booking.status,
            payment_status=booking.payment_status,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class CustomerBookingsSchema(BaseModel):
    bookings: list[BookingSchema]
    total_bookings: int


class BookedSlotSchema(BaseModel):
    start_time: datetime
    end_time: datetime


class SalonReportSchema(BaseModel):
    salon_id: str | None = None
    salon_name: str | None = None
    total_earnings: Decimal = Decimal("0")
    total_bookings: int = 0
    cancelled_bookings: int = 0
    total_refund: Decimal = Decimal("0")

    @classmethod
    def from_entity(cls, report: SalonReport) -> "SalonReportSchema":
        return cls(
            salon_id=report.salon_id,
            salon_name=report.salon_name,
            total_earnings=report.total_earnings,
            total_bookings=report.total_bookings,
            cancelled_bookings=report.cancelled_bookings,
            total_refund=report.total_refund,
        )


class EarningsPointSchema(BaseModel):
    daily: str
    earnings: Decimal

    @classmethod
    def from_point(cls, point: ChartPoint) -> "EarningsPointSchema":
        return cls(daily=point.day, earnings=point.value)


class BookingCountPointSchema(BaseModel):
    daily: str
    count: int

    @classmethod
    def from_point(cls, point: ChartPoint) -> "BookingCountPointSchema":
        return cls(daily=point.day, count=int(point.value))


class PaymentSuccessResponseSchema(BaseModel):
    booking: BookingSchema | None = None
