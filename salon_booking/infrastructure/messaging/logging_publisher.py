from __future__ import annotations

import logging

from salon_booking.application.ports.event_publisher import EventPublisherPort
from salon_booking.domain.entities.booking_event import BookingEvent


class LoggingEventPublisher(EventPublisherPort):
    def __init__(self) -> None:
        self.published: list[BookingEvent] = []
        self._logger = logging.getLogger(__name__)

    def publish(self, event: BookingEvent) -> None:
        self.published.append(event)
        self._logger.info(
            "Mock event publish",
            extra={"event_type": event.event_type, "booking_id": event.booking_id},
        )
