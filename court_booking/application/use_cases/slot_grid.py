from __future__ import annotations

from datetime import date

from court_booking.application.exceptions import NotFoundError
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.domain.entities.slot import SlotStatus


class SlotGrid:
    """Per-hour booked flags for one court and day, used to render the booking page."""

    def __init__(self, store: ReservationStorePort, open_hour: int = 8, close_hour: int = 23) -> None:
        self._store = store
        self._open_hour = open_hour
        self._close_hour = close_hour

    def for_court(self, court_id: str, day: date) -> list[SlotStatus]:
        if not self._store.get_court(court_id):
            raise NotFoundError("Court not found")

        ranges = [
            (b.start_hour, b.end_hour)
            for b in self._store.list_bookings()
            if b.is_confirmed and b.court_id == court_id and b.date == day
        ]
        return [
            SlotStatus(hour=hour, booked=any(start <= hour < end for start, end in ranges))
            for hour in range(self._open_hour, self._close_hour)
        ]
