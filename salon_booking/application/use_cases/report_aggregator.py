from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from decimal import Decimal

from salon_booking.domain.entities.booking import Booking, BookingStatus
from salon_booking.domain.entities.report import ChartPoint, SalonReport
from salon_booking.domain.entities.salon import Salon


def compute_salon_report(bookings: Iterable[Booking], salon: Salon | None = None) -> SalonReport:
    """
    Earnings include cancelled bookings; refunds are the cancelled subset.
    Both totals are reported as-is.
    """
    bookings = list(bookings)
    cancelled = [b for b in bookings if b.status == BookingStatus.CANCELLED]

    return SalonReport(
        salon_id=salon.id if salon else None,
        salon_name=salon.name if salon else None,
        total_earnings=sum((b.total_price for b in bookings), Decimal("0")),
        total_bookings=len(bookings),
        cancelled_bookings=len(cancelled),
        total_refund=sum((b.total_price for b in cancelled), Decimal("0")),
    )


def earnings_series(bookings: Iterable[Booking]) -> list[ChartPoint]:
    return _daily_series(bookings, lambda b: b.total_price, Decimal("0"))


def booking_count_series(bookings: Iterable[Booking]) -> list[ChartPoint]:
    return _daily_series(bookings, lambda b: 1, 0)


def _daily_series(
    bookings: Iterable[Booking],
    value_of: Callable[[Booking], Decimal | int],
    zero: Decimal | int,
) -> list[ChartPoint]:
    totals: dict[str, Decimal | int] = defaultdict(lambda: zero)
    for booking in bookings:
        if booking.status == BookingStatus.CANCELLED:
            continue
        totals[_day_key(booking)] += value_of(booking)
    # ISO day keys sort chronologically
    return [ChartPoint(day=day, value=totals[day]) for day in sorted(totals)]


def _day_key(booking: Booking) -> str:
    return booking.start_time.date().isoformat()
