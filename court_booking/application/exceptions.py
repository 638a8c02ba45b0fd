class CourtBookingError(RuntimeError):
    """Base class for errors reported back to the caller."""
    pass


class SlotUnavailableError(CourtBookingError):
    """Raised when the requested court or coach is already booked for the range."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NotFoundError(CourtBookingError, LookupError):
    """Raised when a referenced court does not exist in reference data."""
    pass


class BookingValidationError(CourtBookingError, ValueError):
    """Raised when request input is malformed (hour range, counts, names)."""
    pass


class StoreCorruptedError(CourtBookingError):
    """Raised when a persisted collection cannot be decoded."""
    pass
