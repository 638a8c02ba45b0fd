from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    WAITLIST = "waitlist"


@dataclass(frozen=True)
class BookingResources:
    rackets: int = 0
    shoes: int = 0
    coach_id: str | None = None


@dataclass(frozen=True)
class PricingBreakdown:
    base_price: float
    weekend_fee: float
    peak_hour_fee: float
    equipment_fee: float
    coach_fee: float
    total: float


@dataclass(frozen=True)
class Booking:
    id: str
    user_id: str
    court_id: str
    date: date
    start_hour: int  # inclusive
    end_hour: int  # exclusive
    resources: BookingResources
    status: BookingStatus
    pricing: PricingBreakdown
    created_at: float

    @property
    def is_confirmed(self) -> bool:
        return self.status == BookingStatus.CONFIRMED
