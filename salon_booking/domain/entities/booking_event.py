from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

BOOKING_CREATED = "booking.created"
PAYMENT_PROCESS = "payment.process"
NOTIFICATION_SEND = "notification.send"


@dataclass(frozen=True)
class BookingEvent:
    event_type: str  # one of BOOKING_CREATED, PAYMENT_PROCESS, NOTIFICATION_SEND
    booking_id: str
    payload: dict[str, Any] = field(default_factory=dict)
