from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from salon_booking.application.exceptions import (
    BookingNotFoundError,
    BookingValidationError,
    InvalidTransitionError,
)
from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.use_cases.slot_availability import check_slot_available
from salon_booking.domain.entities.booking import Booking, BookingStatus
from salon_booking.domain.entities.salon import Salon
from salon_booking.domain.entities.service_offering import ServiceOffering

CENTS = Decimal("0.01")

# Used only when strict transitions are enabled.
ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.SUCCESS, BookingStatus.CANCELLED}),
    BookingStatus.SUCCESS: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}


def total_price_of(services: Sequence[ServiceOffering]) -> Decimal:
    total = sum((Decimal(str(s.price)) for s in services), Decimal("0"))
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)


def total_duration_of(services: Sequence[ServiceOffering]) -> timedelta:
    return timedelta(minutes=sum(s.duration_minutes for s in services))


class BookingLifecycle:
    def __init__(
        self,
        store: BookingStorePort,
        strict_transitions: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._strict_transitions = strict_transitions
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        customer_id: str,
        salon: Salon,
        start: datetime,
        services: Sequence[ServiceOffering],
    ) -> Booking:
        """
        Create a PENDING booking for the given services starting at `start`.
        End time and price are derived from the services. The availability
        check and the insert run under the salon lock.
        """
        if not services:
            raise BookingValidationError("At least one service must be selected.")

        duration = total_duration_of(services)
        if duration <= timedelta(0):
            raise BookingValidationError("Selected services have no duration.")

        end = start + duration
        now = self._clock()
        booking = Booking(
            customer_id=customer_id,
            salon_id=salon.id,
            start_time=start,
            end_time=end,
            total_price=total_price_of(services),
            service_ids=frozenset(s.id for s in services),
            status=BookingStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        with self._store.salon_lock(salon.id):
            check_slot_available(salon, start, end, self._store.list_by_salon(salon.id))
            saved = self._store.add(booking)

        self._logger.info(
            "Booking created",
            extra={"booking_id": saved.id, "salon_id": salon.id, "customer_id": customer_id},
        )
        return saved

    def mark_confirmed_from_payment(self, booking_id: str, payment_status: str | None = None) -> Booking | None:
        """Confirm after a successful payment. Unknown ids are ignored and return None."""
        booking = self._store.get(booking_id)
        if booking is None:
            self._logger.warning(
                "Payment success for unknown booking ignored",
                extra={"booking_id": booking_id, "reason": "not_found"},
            )
            return None

        changes: dict[str, object] = {"status": BookingStatus.CONFIRMED}
        if payment_status:
            changes["payment_status"] = payment_status
        return self._save_changes(booking, **changes)

    def set_status(self, booking_id: str, new_status: BookingStatus) -> Booking:
        booking = self._store.get(booking_id)
        if booking is None:
            raise BookingNotFoundError(f"Booking {booking_id} not found")

        if self._strict_transitions and new_status != booking.status:
            if new_status not in ALLOWED_TRANSITIONS.get(booking.status, frozenset()):
                raise InvalidTransitionError(
                    f"Cannot move booking from {booking.status.value} to {new_status.value}"
                )

        return self._save_changes(booking, status=new_status)

    def _save_changes(self, booking: Booking, **changes: object) -> Booking:
        updated = self._store.update(replace(booking, updated_at=self._clock(), **changes))
        self._logger.info(
            "Booking status updated",
            extra={"booking_id": updated.id, "status": updated.status.value},
        )
        return updated
