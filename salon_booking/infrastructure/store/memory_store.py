from __future__ import annotations

import threading
import uuid
from dataclasses import replace

from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.domain.entities.booking import Booking
from salon_booking.infrastructure.store.locks import SalonLockRegistry


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}
        self._lock = threading.Lock()
        self._salon_locks = SalonLockRegistry()

    def add(self, booking: Booking) -> Booking:
        stored = replace(booking, id=booking.id or uuid.uuid4().hex)
        with self._lock:
            self._bookings[stored.id] = stored
        return stored

    def update(self, booking: Booking) -> Booking:
        with self._lock:
            if booking.id not in self._bookings:
                raise KeyError(booking.id)
            self._bookings[booking.id] = booking
        return booking

    def get(self, booking_id: str) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def list_by_customer(self, customer_id: str) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.customer_id == customer_id]

    def list_by_salon(self, salon_id: str) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.salon_id == salon_id]

    def salon_lock(self, salon_id: str) -> threading.RLock:
        return self._salon_locks.get(salon_id)
