from fastapi import HTTPException

from court_booking.application.exceptions import (
    BookingValidationError,
    CourtBookingError,
    NotFoundError,
    SlotUnavailableError,
)


def to_http_error(error: CourtBookingError) -> HTTPException:
    if isinstance(error, BookingValidationError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, SlotUnavailableError):
        return HTTPException(status_code=409, detail=error.reason)
    return HTTPException(status_code=500, detail=str(error))
