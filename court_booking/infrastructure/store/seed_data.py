from __future__ import annotations

from court_booking.domain.entities.coach import Coach
from court_booking.domain.entities.court import Court, CourtType
from court_booking.domain.entities.equipment import Equipment
from court_booking.domain.entities.pricing_rule import PeakHourRule, PricingRule, WeekendRule

SEED_COURTS: list[Court] = [
    Court(id="c1", name="Badminton A (Indoor)", type=CourtType.INDOOR, base_price=20),
    Court(id="c2", name="Badminton B (Indoor)", type=CourtType.INDOOR, base_price=20),
    Court(id="c3", name="Tennis 1 (Outdoor)", type=CourtType.OUTDOOR, base_price=15),
    Court(id="c4", name="Tennis 2 (Outdoor)", type=CourtType.OUTDOOR, base_price=15),
]

SEED_COACHES: list[Coach] = [
    Coach(id="ch1", name="John Doe", specialty="Badminton", hourly_rate=25),
    Coach(id="ch2", name="Sarah Smith", specialty="Tennis", hourly_rate=30),
]

SEED_EQUIPMENT: list[Equipment] = [
    Equipment(id="eq1", name="Racket", total_stock=20, price_per_session=5),
    Equipment(id="eq2", name="Shoes", total_stock=10, price_per_session=3),
]

SEED_RULES: list[PricingRule] = [
    WeekendRule(id="r1", name="Weekend Surcharge", surcharge=5, days=frozenset({0, 6})),
    PeakHourRule(id="r2", name="Peak Hour", multiplier=1.5, start_time="18:00", end_time="21:00"),
]
