from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class DailyRevenue:
    date: date
    revenue: float


@dataclass(frozen=True)
class RevenueReport:
    total_revenue: float
    confirmed_bookings: int
    total_bookings: int
    daily: list[DailyRevenue] = field(default_factory=list)
