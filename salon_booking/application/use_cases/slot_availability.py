from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from salon_booking.application.exceptions import OutsideBusinessHoursError, SlotConflictError
from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.salon import Salon


def slots_conflict(start: datetime, end: datetime, other_start: datetime, other_end: datetime) -> bool:
    """
    Two slots conflict when they overlap or share any boundary instant.
    Back-to-back slots (one ends exactly when the other starts) conflict too.
    """
    return start <= other_end and end >= other_start


def check_slot_available(
    salon: Salon,
    start: datetime,
    end: datetime,
    existing_bookings: Iterable[Booking],
) -> bool:
    """
    Validate a proposed slot against salon hours and existing bookings.

    Business hours are taken on the calendar day of `start`. Existing bookings
    need not be pre-filtered by day; only intersecting ones are rejected.
    Returns True or raises OutsideBusinessHoursError / SlotConflictError.
    """
    open_at, close_at = salon.opening_window(start.date())
    if start < open_at or end > close_at:
        raise OutsideBusinessHoursError(
            f"Booking must be within salon hours {salon.open_time:%H:%M}-{salon.close_time:%H:%M}."
        )

    for booking in existing_bookings:
        if slots_conflict(start, end, booking.start_time, booking.end_time):
            raise SlotConflictError(
                f"Slot {start:%Y-%m-%d %H:%M}-{end:%H:%M} is not available, choose a different time."
            )
    return True


def is_slot_available(
    salon: Salon,
    start: datetime,
    end: datetime,
    existing_bookings: Iterable[Booking],
) -> bool:
    """Boolean form of check_slot_available."""
    try:
        return check_slot_available(salon, start, end, existing_bookings)
    except (OutsideBusinessHoursError, SlotConflictError):
        return False
