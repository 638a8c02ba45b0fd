from __future__ import annotations

import pytest

from court_booking.application.use_cases.calculate_price import PricingCalculator
from court_booking.application.use_cases.check_availability import AvailabilityChecker
from court_booking.application.use_cases.create_booking import BookingWriter
from court_booking.infrastructure.store.memory_store import MemoryReservationStore
from court_booking.infrastructure.store.seed_data import (
    SEED_COACHES,
    SEED_COURTS,
    SEED_EQUIPMENT,
    SEED_RULES,
)


@pytest.fixture
def store() -> MemoryReservationStore:
    seeded = MemoryReservationStore()
    seeded.initialize(
        courts=SEED_COURTS,
        coaches=SEED_COACHES,
        equipment=SEED_EQUIPMENT,
        rules=SEED_RULES,
    )
    return seeded


@pytest.fixture
def writer(store: MemoryReservationStore) -> BookingWriter:
    return BookingWriter(
        store=store,
        availability=AvailabilityChecker(store),
        pricing=PricingCalculator(store),
    )
