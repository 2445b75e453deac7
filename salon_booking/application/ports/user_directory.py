from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.customer import Customer


class UserDirectoryPort(ABC):
    @abstractmethod
    def get_user_from_token(self, token: str) -> Customer | None:
        """Resolve the caller identified by an Authorization header value."""
        raise NotImplementedError
