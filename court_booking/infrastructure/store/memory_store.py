from __future__ import annotations

import threading

from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.domain.entities.booking import Booking
from court_booking.domain.entities.coach import Coach
from court_booking.domain.entities.court import Court
from court_booking.domain.entities.equipment import Equipment
from court_booking.domain.entities.pricing_rule import PricingRule


class MemoryReservationStore(ReservationStorePort):
    def __init__(self) -> None:
        self._courts: list[Court] = []
        self._coaches: list[Coach] = []
        self._equipment: list[Equipment] = []
        self._rules: list[PricingRule] = []
        self._bookings: list[Booking] = []
        self._initialized = False
        self._lock = threading.Lock()

    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(
        self,
        courts: list[Court],
        coaches: list[Coach],
        equipment: list[Equipment],
        rules: list[PricingRule],
    ) -> bool:
        with self._lock:
            if self._initialized:
                return False
            self._courts = list(courts)
            self._coaches = list(coaches)
            self._equipment = list(equipment)
            self._rules = list(rules)
            self._bookings = []
            self._initialized = True
            return True

    def list_courts(self) -> list[Court]:
        return list(self._courts)

    def list_coaches(self) -> list[Coach]:
        return list(self._coaches)

    def list_equipment(self) -> list[Equipment]:
        return list(self._equipment)

    def list_pricing_rules(self) -> list[PricingRule]:
        return list(self._rules)

    def list_bookings(self) -> list[Booking]:
        return list(self._bookings)

    def append_booking(self, booking: Booking) -> None:
        with self._lock:
            self._bookings.append(booking)

    def append_equipment(self, equipment: Equipment) -> None:
        with self._lock:
            self._equipment.append(equipment)
