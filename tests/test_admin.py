"""
Tests for equipment management, revenue reporting, slot grid and seeding.
"""

from __future__ import annotations

from datetime import date

import pytest

from court_booking.application.exceptions import BookingValidationError, NotFoundError
from court_booking.application.use_cases.manage_equipment import EquipmentCatalog
from court_booking.application.use_cases.revenue_report import RevenueReportBuilder
from court_booking.application.use_cases.seed_reference_data import SeedReferenceData
from court_booking.application.use_cases.slot_grid import SlotGrid
from court_booking.infrastructure.store.memory_store import MemoryReservationStore
from court_booking.infrastructure.store.seed_data import (
    SEED_COACHES,
    SEED_COURTS,
    SEED_EQUIPMENT,
    SEED_RULES,
)
from tests.helpers import SATURDAY, TUESDAY, make_request


def test_add_equipment_appends_with_fresh_id(store):
    catalog = EquipmentCatalog(store)
    before = catalog.list_all()

    added = catalog.add("Shuttlecock Tube", total_stock=40, price_per_session=2.5)

    after = catalog.list_all()
    assert added.id.startswith("eq_")
    assert added.id not in {item.id for item in before}
    assert after[: len(before)] == before
    assert after[-1] == added


def test_added_equipment_ids_are_distinct(store):
    catalog = EquipmentCatalog(store)

    ids = {catalog.add(f"Item {i}", 1, 1).id for i in range(20)}

    assert len(ids) == 20


@pytest.mark.parametrize(
    "name,stock,price",
    [("", 1, 1), ("   ", 1, 1), ("Balls", -1, 1), ("Balls", 1, -0.5)],
)
def test_add_equipment_rejects_bad_input(store, name, stock, price):
    with pytest.raises(BookingValidationError):
        EquipmentCatalog(store).add(name, stock, price)

    assert len(store.list_equipment()) == len(SEED_EQUIPMENT)


def test_revenue_report_totals_and_daily_trend(store, writer):
    writer.create(make_request(TUESDAY, 9, 10))  # 20
    writer.create(make_request(TUESDAY, 10, 11, court_id="c3"))  # 15
    writer.create(make_request(SATURDAY, 9, 10))  # 20 + 5 weekend

    report = RevenueReportBuilder(store).build(trend_days=7)

    assert report.total_revenue == 60
    assert report.confirmed_bookings == 3
    assert report.total_bookings == 3
    assert [(d.date, d.revenue) for d in report.daily] == [(TUESDAY, 35), (SATURDAY, 25)]


def test_revenue_trend_keeps_latest_active_days(store, writer):
    for day in range(1, 11):
        writer.create(make_request(date(2024, 3, day), 9, 10))

    report = RevenueReportBuilder(store).build(trend_days=7)

    assert [d.date.day for d in report.daily] == [4, 5, 6, 7, 8, 9, 10]


def test_revenue_report_on_empty_store(store):
    report = RevenueReportBuilder(store).build()

    assert report.total_revenue == 0
    assert report.total_bookings == 0
    assert report.daily == []


def test_slot_grid_marks_booked_hours(store, writer):
    writer.create(make_request(TUESDAY, 10, 12))

    slots = SlotGrid(store, open_hour=8, close_hour=23).for_court("c1", TUESDAY)

    assert [s.hour for s in slots] == list(range(8, 23))
    assert [s.hour for s in slots if s.booked] == [10, 11]


def test_slot_grid_unknown_court(store):
    with pytest.raises(NotFoundError):
        SlotGrid(store).for_court("missing", TUESDAY)


def test_seeding_runs_once():
    store = MemoryReservationStore()
    seed = SeedReferenceData(
        store=store,
        courts=SEED_COURTS,
        coaches=SEED_COACHES,
        equipment=SEED_EQUIPMENT,
        rules=SEED_RULES,
    )

    assert seed.execute() is True
    EquipmentCatalog(store).add("Grip Tape", 5, 1)
    assert seed.execute() is False

    assert [c.id for c in store.list_courts()] == ["c1", "c2", "c3", "c4"]
    assert len(store.list_equipment()) == len(SEED_EQUIPMENT) + 1
