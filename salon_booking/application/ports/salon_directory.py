from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.salon import Salon


class SalonDirectoryPort(ABC):
    @abstractmethod
    def get_salon(self, salon_id: str, token: str | None = None) -> Salon | None:
        """Get salon (with opening hours) by id."""
        raise NotImplementedError

    @abstractmethod
    def get_salon_by_owner(self, token: str) -> Salon | None:
        """Get the salon owned by the caller identified by token."""
        raise NotImplementedError
