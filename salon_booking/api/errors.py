from __future__ import annotations

from fastapi import HTTPException

from salon_booking.application.exceptions import (
    BookingError,
    BookingNotFoundError,
    InvalidTransitionError,
    SlotConflictError,
    UpstreamServiceError,
)


def to_http_error(exc: BookingError | UpstreamServiceError) -> HTTPException:
    if isinstance(exc, UpstreamServiceError):
        return HTTPException(status_code=502, detail=str(exc))
    if isinstance(exc, BookingNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, (SlotConflictError, InvalidTransitionError)):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))
