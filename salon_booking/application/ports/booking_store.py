from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from salon_booking.domain.entities.booking import Booking


class BookingStorePort(ABC):
    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """Persist a new booking. Returns the stored copy with its id assigned."""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> Booking:
        """Replace an existing booking by id. Raises KeyError if it is unknown."""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_by_salon(self, salon_id: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def salon_lock(self, salon_id: str) -> AbstractContextManager:
        """
        Mutual exclusion scope for one salon.
        Availability checks and the insert that follows must run inside it.
        """
        raise NotImplementedError
