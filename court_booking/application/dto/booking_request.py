from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from court_booking.domain.entities.booking import BookingResources


@dataclass(frozen=True)
class BookingRequest:
    user_id: str
    court_id: str
    date: date
    start_hour: int
    end_hour: int
    resources: BookingResources = field(default_factory=BookingResources)
