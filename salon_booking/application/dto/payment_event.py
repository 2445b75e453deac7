from __future__ import annotations

from pydantic import BaseModel, Field


class PaymentSuccessDTO(BaseModel):
    """Payment service callback for a completed payment order."""

    booking_id: str = Field(min_length=1)
    payment_order_id: str | None = None
    payment_status: str | None = None
