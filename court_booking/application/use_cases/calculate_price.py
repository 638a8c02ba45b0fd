from __future__ import annotations

from datetime import date

from court_booking.application.exceptions import BookingValidationError, NotFoundError
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.utils.intervals import (
    overlaps,
    sunday_first_weekday,
    validate_hour_range,
)
from court_booking.domain.entities.booking import BookingResources, PricingBreakdown
from court_booking.domain.entities.court import Court
from court_booking.domain.entities.equipment import Equipment
from court_booking.domain.entities.pricing_rule import PeakHourRule, WeekendRule

RACKET_ITEM = "Racket"
SHOES_ITEM = "Shoes"


class PricingCalculator:
    """
    Itemized price for a court booking.

    Fees are composed from the court base rate, the first weekend rule, the
    first peak-hour rule, per-session equipment and the coach's hourly rate.
    Missing equipment items or unknown coaches cost nothing.
    """

    def __init__(self, store: ReservationStorePort) -> None:
        self._store = store

    def calculate(
        self,
        court: Court,
        day: date,
        start_hour: int,
        end_hour: int,
        resources: BookingResources,
    ) -> PricingBreakdown:
        validate_hour_range(start_hour, end_hour)
        if resources.rackets < 0 or resources.shoes < 0:
            raise BookingValidationError("Equipment counts cannot be negative.")

        rules = self._store.list_pricing_rules()
        duration = end_hour - start_hour
        base_price = court.base_price * duration

        weekend_fee = 0.0
        weekend_rule = next((r for r in rules if isinstance(r, WeekendRule)), None)
        if weekend_rule and sunday_first_weekday(day) in weekend_rule.days:
            weekend_fee = weekend_rule.surcharge * duration

        # Any contact with the peak window prices the whole booking at the peak rate.
        peak_hour_fee = 0.0
        peak_rule = next((r for r in rules if isinstance(r, PeakHourRule)), None)
        peak_start = peak_rule.start_hour if peak_rule else None
        peak_end = peak_rule.end_hour if peak_rule else None
        if peak_start is not None and peak_end is not None and overlaps(
            start_hour, end_hour, peak_start, peak_end
        ):
            multiplier = peak_rule.multiplier or 1
            peak_hour_fee = base_price * multiplier - base_price

        equipment = self._store.list_equipment()
        equipment_fee = (
            resources.rackets * _unit_price(equipment, RACKET_ITEM)
            + resources.shoes * _unit_price(equipment, SHOES_ITEM)
        )

        coach_fee = 0.0
        if resources.coach_id:
            coach = self._store.get_coach(resources.coach_id)
            if coach:
                coach_fee = coach.hourly_rate * duration

        return PricingBreakdown(
            base_price=base_price,
            weekend_fee=weekend_fee,
            peak_hour_fee=peak_hour_fee,
            equipment_fee=equipment_fee,
            coach_fee=coach_fee,
            total=base_price + weekend_fee + peak_hour_fee + equipment_fee + coach_fee,
        )

    def preview(
        self,
        court_id: str,
        day: date,
        start_hour: int,
        end_hour: int,
        resources: BookingResources,
    ) -> PricingBreakdown:
        """Same computation as booking creation, resolving the court by id first."""
        court = self._store.get_court(court_id)
        if not court:
            raise NotFoundError("Court not found")
        return self.calculate(court, day, start_hour, end_hour, resources)


def _unit_price(equipment: list[Equipment], name: str) -> float:
    item = next((e for e in equipment if e.name == name), None)
    return item.price_per_session if item else 0.0
