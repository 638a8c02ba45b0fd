"""
Tests for the JSON-file reservation store.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from court_booking.application.exceptions import StoreCorruptedError
from court_booking.application.use_cases.calculate_price import PricingCalculator
from court_booking.application.use_cases.check_availability import AvailabilityChecker
from court_booking.application.use_cases.create_booking import BookingWriter
from court_booking.application.use_cases.manage_equipment import EquipmentCatalog
from court_booking.domain.entities.pricing_rule import PeakHourRule, WeekendRule
from court_booking.infrastructure.store.json_store import JsonReservationStore
from court_booking.infrastructure.store.seed_data import (
    SEED_COACHES,
    SEED_COURTS,
    SEED_EQUIPMENT,
    SEED_RULES,
)
from tests.helpers import SATURDAY, make_request


def _seeded(tmpdir: str) -> JsonReservationStore:
    store = JsonReservationStore(data_dir=tmpdir)
    store.initialize(courts=SEED_COURTS, coaches=SEED_COACHES, equipment=SEED_EQUIPMENT, rules=SEED_RULES)
    return store


def test_reference_data_round_trips():
    """Reference data written by one store instance is read back by another."""
    with tempfile.TemporaryDirectory() as tmpdir:
        _seeded(tmpdir)
        reopened = JsonReservationStore(data_dir=tmpdir)

        assert reopened.is_initialized() is True
        assert reopened.list_courts() == SEED_COURTS
        assert reopened.list_coaches() == SEED_COACHES
        assert reopened.list_equipment() == SEED_EQUIPMENT

        rules = reopened.list_pricing_rules()
        assert isinstance(rules[0], WeekendRule)
        assert rules[0].days == frozenset({0, 6})
        assert isinstance(rules[1], PeakHourRule)
        assert (rules[1].start_hour, rules[1].end_hour) == (18, 21)


def test_bookings_persist_across_instances():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = _seeded(tmpdir)
        writer = BookingWriter(store, AvailabilityChecker(store), PricingCalculator(store))
        booking = writer.create(make_request(SATURDAY, 17, 19, coach_id="ch1", rackets=1))

        reopened = JsonReservationStore(data_dir=tmpdir)

        assert reopened.list_bookings() == [booking]
        assert AvailabilityChecker(reopened).check(SATURDAY, 18, 19, "c1").available is False


def test_collections_are_keyed_by_name():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = _seeded(tmpdir)
        EquipmentCatalog(store).add("Balls", 30, 1)

        files = {p.name for p in Path(tmpdir).glob("*.json")}
        equipment = json.loads((Path(tmpdir) / "equipment.json").read_text(encoding="utf-8"))

        assert {"courts.json", "coaches.json", "equipment.json", "rules.json", "bookings.json", "meta.json"} <= files
        assert equipment[-1]["name"] == "Balls"
        assert equipment[-1]["pricePerSession"] == 1


def test_uninitialized_directory_reads_empty():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonReservationStore(data_dir=tmpdir)

        assert store.is_initialized() is False
        assert store.list_bookings() == []
        assert store.list_courts() == []


def test_corrupted_collection_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = _seeded(tmpdir)
        (Path(tmpdir) / "bookings.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(StoreCorruptedError):
            store.list_bookings()


def test_record_missing_a_field_raises():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = _seeded(tmpdir)
        (Path(tmpdir) / "bookings.json").write_text(
            json.dumps([{"id": "b1", "userId": "u1", "date": "2024-01-06"}]), encoding="utf-8"
        )

        with pytest.raises(StoreCorruptedError, match="bookings"):
            store.list_bookings()


def test_second_initialize_keeps_existing_bookings():
    """A second instance on the same directory must not reseed over live data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = _seeded(tmpdir)
        writer = BookingWriter(store, AvailabilityChecker(store), PricingCalculator(store))
        booking = writer.create(make_request(SATURDAY, 10, 11))

        late = JsonReservationStore(data_dir=tmpdir)
        seeded = late.initialize(courts=SEED_COURTS, coaches=SEED_COACHES, equipment=SEED_EQUIPMENT, rules=SEED_RULES)

        assert seeded is False
        assert late.list_bookings() == [booking]
