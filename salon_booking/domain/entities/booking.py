from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    SUCCESS = "SUCCESS"


@dataclass(frozen=True)
class Booking:
    customer_id: str
    salon_id: str
    start_time: datetime  # naive local time
    end_time: datetime
    total_price: Decimal
    service_ids: frozenset[str] = field(default_factory=frozenset)
    status: BookingStatus = BookingStatus.PENDING
    payment_status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    id: str | None = None  # assigned by the store on first save
