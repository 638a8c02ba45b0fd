from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.utils.intervals import overlaps, validate_hour_range

COURT_TAKEN_REASON = "Court is already booked for this time slot."
COACH_TAKEN_REASON = "Selected coach is unavailable at this time."


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    reason: str | None = None


class AvailabilityChecker:
    def __init__(self, store: ReservationStorePort) -> None:
        self._store = store

    def check(
        self,
        day: date,
        start_hour: int,
        end_hour: int,
        court_id: str,
        coach_id: str | None = None,
    ) -> AvailabilityResult:
        """
        Scan confirmed bookings on ``day`` for overlap on the court, then on the coach.
        The court conflict wins when both would fail.
        """
        validate_hour_range(start_hour, end_hour)
        same_day = [b for b in self._store.list_bookings() if b.is_confirmed and b.date == day]

        for booking in same_day:
            if booking.court_id == court_id and overlaps(
                start_hour, end_hour, booking.start_hour, booking.end_hour
            ):
                return AvailabilityResult(available=False, reason=COURT_TAKEN_REASON)

        if coach_id:
            for booking in same_day:
                if booking.resources.coach_id == coach_id and overlaps(
                    start_hour, end_hour, booking.start_hour, booking.end_hour
                ):
                    return AvailabilityResult(available=False, reason=COACH_TAKEN_REASON)

        return AvailabilityResult(available=True)
