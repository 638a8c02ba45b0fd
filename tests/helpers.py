from __future__ import annotations

from datetime import date

from court_booking.application.dto.booking_request import BookingRequest
from court_booking.domain.entities.booking import BookingResources

SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)
TUESDAY = date(2024, 1, 2)


def make_request(
    day: date,
    start: int,
    end: int,
    court_id: str = "c1",
    coach_id: str | None = None,
    rackets: int = 0,
    shoes: int = 0,
    user_id: str = "u1",
) -> BookingRequest:
    return BookingRequest(
        user_id=user_id,
        court_id=court_id,
        date=day,
        start_hour=start,
        end_hour=end,
        resources=BookingResources(rackets=rackets, shoes=shoes, coach_id=coach_id),
    )
