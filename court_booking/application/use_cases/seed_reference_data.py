from __future__ import annotations

import logging

from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.domain.entities.coach import Coach
from court_booking.domain.entities.court import Court
from court_booking.domain.entities.equipment import Equipment
from court_booking.domain.entities.pricing_rule import PricingRule


class SeedReferenceData:
    def __init__(
        self,
        store: ReservationStorePort,
        courts: list[Court],
        coaches: list[Coach],
        equipment: list[Equipment],
        rules: list[PricingRule],
    ) -> None:
        self._store = store
        self._courts = courts
        self._coaches = coaches
        self._equipment = equipment
        self._rules = rules
        self._logger = logging.getLogger(__name__)

    def execute(self) -> bool:
        """Seed an uninitialized store. Returns False when it was already seeded."""
        seeded = self._store.initialize(
            courts=list(self._courts),
            coaches=list(self._coaches),
            equipment=list(self._equipment),
            rules=list(self._rules),
        )
        if not seeded:
            return False
        self._logger.info(
            "Reference data seeded: %s courts, %s coaches, %s equipment, %s rules",
            len(self._courts),
            len(self._coaches),
            len(self._equipment),
            len(self._rules),
        )
        return True
