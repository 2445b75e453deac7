class BookingError(Exception):
    """Base class for conditions the caller should surface as a rejected request."""
    pass


class BookingValidationError(BookingError):
    """Raised for malformed booking input, e.g. no services selected."""
    pass


class OutsideBusinessHoursError(BookingValidationError):
    """Raised when a proposed slot starts before opening or ends after closing."""
    pass


class SlotConflictError(BookingValidationError):
    """Raised when a proposed slot overlaps or touches an existing booking."""
    pass


class BookingNotFoundError(BookingError):
    """Raised when a booking reference does not resolve."""
    pass


class SalonNotFoundError(BookingNotFoundError):
    """Raised when a salon reference does not resolve."""
    pass


class InvalidTransitionError(BookingError):
    """Raised when strict transitions are enabled and a status change is not allowed."""
    pass


class UpstreamServiceError(RuntimeError):
    """Raised when a remote collaborator fails (timeouts, network errors, 5xx)."""
    pass
