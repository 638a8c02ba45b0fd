from __future__ import annotations

from abc import ABC, abstractmethod

from court_booking.domain.entities.booking import Booking
from court_booking.domain.entities.coach import Coach
from court_booking.domain.entities.court import Court
from court_booking.domain.entities.equipment import Equipment
from court_booking.domain.entities.pricing_rule import PricingRule


class ReservationStorePort(ABC):
    @abstractmethod
    def is_initialized(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def initialize(
        self,
        courts: list[Court],
        coaches: list[Coach],
        equipment: list[Equipment],
        rules: list[PricingRule],
    ) -> bool:
        """
        Write reference data and an empty booking collection, then mark the
        store initialized. The check and the writes are one step: an already
        initialized store is left untouched and False is returned.
        """
        raise NotImplementedError

    @abstractmethod
    def list_courts(self) -> list[Court]:
        raise NotImplementedError

    @abstractmethod
    def list_coaches(self) -> list[Coach]:
        raise NotImplementedError

    @abstractmethod
    def list_equipment(self) -> list[Equipment]:
        raise NotImplementedError

    @abstractmethod
    def list_pricing_rules(self) -> list[PricingRule]:
        raise NotImplementedError

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def append_booking(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_equipment(self, equipment: Equipment) -> None:
        raise NotImplementedError

    def get_court(self, court_id: str) -> Court | None:
        return next((c for c in self.list_courts() if c.id == court_id), None)

    def get_coach(self, coach_id: str) -> Coach | None:
        return next((c for c in self.list_coaches() if c.id == coach_id), None)
