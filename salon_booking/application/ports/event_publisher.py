from abc import ABC, abstractmethod

from salon_booking.domain.entities.booking_event import BookingEvent


class EventPublisherPort(ABC):
    @abstractmethod
    def publish(self, event: BookingEvent) -> None:
        """Fire-and-forget. Implementations log failures instead of raising."""
        raise NotImplementedError
