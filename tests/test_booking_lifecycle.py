"""
Tests for booking creation and status transitions.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from decimal import Decimal

import pytest

from salon_booking.application.exceptions import (
    BookingNotFoundError,
    BookingValidationError,
    InvalidTransitionError,
    SlotConflictError,
)
from salon_booking.application.use_cases.booking_lifecycle import BookingLifecycle
from salon_booking.domain.entities.booking import BookingStatus
from salon_booking.domain.entities.service_offering import ServiceOffering

from conftest import TickingClock

START = datetime(2030, 5, 6, 10, 0)


def test_create_derives_end_time_and_price(lifecycle, salon, services, store):
    """End time and price come from the selected services."""
    booking = lifecycle.create("cust", salon, START, [services["cut"], services["trim"]])

    assert booking.id
    assert booking.status == BookingStatus.PENDING
    assert booking.end_time == datetime(2030, 5, 6, 10, 45)
    assert booking.total_price == Decimal("80.00")
    assert booking.service_ids == frozenset({"cut", "trim"})
    assert booking.created_at == booking.updated_at
    assert store.get(booking.id) == booking


def test_total_price_rounds_half_up(lifecycle, salon):
    """Total price is rounded to cents with ROUND_HALF_UP."""
    odd = [
        ServiceOffering(id="a", name="A", duration_minutes=10, price=Decimal("10.005")),
        ServiceOffering(id="b", name="B", duration_minutes=10, price=Decimal("0")),
    ]
    booking = lifecycle.create("cust", salon, START, odd)
    assert booking.total_price == Decimal("10.01")


def test_create_without_services_is_rejected(lifecycle, salon, store):
    """A booking without services is invalid and nothing is stored."""
    with pytest.raises(BookingValidationError):
        lifecycle.create("cust", salon, START, [])
    assert store.list_by_salon(salon.id) == []


def test_create_with_zero_duration_is_rejected(lifecycle, salon):
    """Services adding up to zero minutes are invalid."""
    free = ServiceOffering(id="free", name="Consult", duration_minutes=0, price=Decimal("0"))
    with pytest.raises(BookingValidationError):
        lifecycle.create("cust", salon, START, [free])


def test_conflicting_create_is_not_persisted(lifecycle, salon, services, store):
    """A rejected slot leaves the store untouched."""
    lifecycle.create("cust", salon, START, [services["cut"]])

    with pytest.raises(SlotConflictError):
        lifecycle.create("other", salon, datetime(2030, 5, 6, 10, 30), [services["cut"]])

    assert len(store.list_by_salon(salon.id)) == 1


def test_concurrent_creates_for_same_slot_admit_one(store, salon, services):
    """Parallel requests for the same slot must not both pass the conflict check."""
    lifecycle = BookingLifecycle(store)

    def attempt(i: int) -> bool:
        try:
            lifecycle.create(f"cust-{i}", salon, START, [services["color"]])
            return True
        except SlotConflictError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(16)))

    assert results.count(True) == 1
    assert len(store.list_by_salon(salon.id)) == 1


def test_payment_success_confirms_booking(lifecycle, salon, services):
    """Payment success confirms and stamps updated_at, keeping created_at."""
    created = lifecycle.create("cust", salon, START, [services["cut"]])

    confirmed = lifecycle.mark_confirmed_from_payment(created.id, payment_status="PAID")

    assert confirmed.status == BookingStatus.CONFIRMED
    assert confirmed.payment_status == "PAID"
    assert confirmed.created_at == created.created_at
    assert confirmed.updated_at > created.updated_at


def test_payment_success_for_unknown_booking_is_a_no_op(lifecycle, store, salon):
    """Late callbacks for unknown bookings neither fail nor create anything."""
    assert lifecycle.mark_confirmed_from_payment("missing") is None
    assert store.get("missing") is None
    assert store.list_by_salon(salon.id) == []


def test_set_status_unknown_booking_raises(lifecycle):
    """Manual status updates require an existing booking."""
    with pytest.raises(BookingNotFoundError):
        lifecycle.set_status("missing", BookingStatus.CONFIRMED)


def test_set_status_twice_is_idempotent(lifecycle, salon, services):
    """Re-applying the same status succeeds with the same result."""
    created = lifecycle.create("cust", salon, START, [services["cut"]])

    first = lifecycle.set_status(created.id, BookingStatus.CONFIRMED)
    second = lifecycle.set_status(created.id, BookingStatus.CONFIRMED)

    assert first.status == second.status == BookingStatus.CONFIRMED


def test_set_status_is_permissive_by_default(lifecycle, salon, services):
    """Without strict mode any status can follow any other."""
    created = lifecycle.create("cust", salon, START, [services["cut"]])
    lifecycle.set_status(created.id, BookingStatus.CANCELLED)

    reopened = lifecycle.set_status(created.id, BookingStatus.PENDING)

    assert reopened.status == BookingStatus.PENDING


def test_strict_transitions_reject_leaving_cancelled(store, salon, services):
    """Strict mode refuses CANCELLED -> PENDING but allows repeating CANCELLED."""
    lifecycle = BookingLifecycle(store, strict_transitions=True, clock=TickingClock())
    created = lifecycle.create("cust", salon, START, [services["cut"]])
    lifecycle.set_status(created.id, BookingStatus.CANCELLED)

    with pytest.raises(InvalidTransitionError):
        lifecycle.set_status(created.id, BookingStatus.PENDING)

    assert lifecycle.set_status(created.id, BookingStatus.CANCELLED).status == BookingStatus.CANCELLED


def test_strict_transitions_allow_normal_progress(store, salon, services):
    """Strict mode allows PENDING -> CONFIRMED -> SUCCESS."""
    lifecycle = BookingLifecycle(store, strict_transitions=True, clock=TickingClock())
    created = lifecycle.create("cust", salon, START, [services["cut"]])

    lifecycle.set_status(created.id, BookingStatus.CONFIRMED)
    done = lifecycle.set_status(created.id, BookingStatus.SUCCESS)

    assert done.status == BookingStatus.SUCCESS
