from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SalonReport:
    salon_id: str | None = None
    salon_name: str | None = None
    total_earnings: Decimal = Decimal("0")
    total_bookings: int = 0
    cancelled_bookings: int = 0
    total_refund: Decimal = Decimal("0")


@dataclass(frozen=True)
class ChartPoint:
    day: str  # YYYY-MM-DD
    value: Decimal | int
