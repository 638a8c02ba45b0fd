from __future__ import annotations

from collections import defaultdict
from datetime import date

from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.domain.entities.revenue import DailyRevenue, RevenueReport


class RevenueReportBuilder:
    def __init__(self, store: ReservationStorePort) -> None:
        self._store = store

    def build(self, trend_days: int = 7) -> RevenueReport:
        """
        Totals over every stored booking plus per-day revenue for the last
        ``trend_days`` dates that have any bookings, oldest first.
        """
        bookings = self._store.list_bookings()

        per_day: dict[date, float] = defaultdict(float)
        for booking in bookings:
            per_day[booking.date] += booking.pricing.total

        days = sorted(per_day)[-trend_days:] if trend_days > 0 else []

        return RevenueReport(
            total_revenue=sum(b.pricing.total for b in bookings),
            confirmed_bookings=sum(1 for b in bookings if b.is_confirmed),
            total_bookings=len(bookings),
            daily=[DailyRevenue(date=d, revenue=per_day[d]) for d in days],
        )
