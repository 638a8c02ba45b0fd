"""
Tests for court and coach overlap detection.
"""

from __future__ import annotations

import pytest

from court_booking.application.exceptions import BookingValidationError
from court_booking.application.use_cases.check_availability import (
    COACH_TAKEN_REASON,
    COURT_TAKEN_REASON,
    AvailabilityChecker,
)
from court_booking.application.utils.intervals import overlaps
from court_booking.domain.entities.booking import Booking, BookingStatus
from tests.helpers import SATURDAY, TUESDAY, make_request


def test_back_to_back_slots_do_not_conflict(store, writer):
    """A 9-10 booking leaves 10-11 free on the same court."""
    writer.create(make_request(TUESDAY, 9, 10))

    result = AvailabilityChecker(store).check(TUESDAY, 10, 11, "c1")

    assert result.available is True
    assert result.reason is None


def test_overlapping_range_on_same_court_is_rejected(store, writer):
    """Existing 14-16, new 15-17 on the same court and date conflicts."""
    writer.create(make_request(TUESDAY, 14, 16))

    result = AvailabilityChecker(store).check(TUESDAY, 15, 17, "c1")

    assert result.available is False
    assert result.reason == COURT_TAKEN_REASON


def test_other_court_or_other_day_is_free(store, writer):
    writer.create(make_request(TUESDAY, 14, 16))
    checker = AvailabilityChecker(store)

    assert checker.check(TUESDAY, 14, 16, "c2").available is True
    assert checker.check(SATURDAY, 14, 16, "c1").available is True


def test_coach_conflict_across_courts(store, writer):
    """A coach booked on one court cannot be booked on another at the same time."""
    writer.create(make_request(TUESDAY, 10, 12, court_id="c1", coach_id="ch1"))

    result = AvailabilityChecker(store).check(TUESDAY, 11, 13, "c2", coach_id="ch1")

    assert result.available is False
    assert result.reason == COACH_TAKEN_REASON


def test_court_conflict_takes_priority_over_coach(store, writer):
    writer.create(make_request(TUESDAY, 10, 12, court_id="c1", coach_id="ch1"))

    result = AvailabilityChecker(store).check(TUESDAY, 10, 12, "c1", coach_id="ch1")

    assert result.reason == COURT_TAKEN_REASON


def test_coach_is_ignored_when_not_requested(store, writer):
    writer.create(make_request(TUESDAY, 10, 12, court_id="c1", coach_id="ch1"))

    assert AvailabilityChecker(store).check(TUESDAY, 10, 12, "c2").available is True


def test_only_confirmed_bookings_block(store, writer):
    booking = writer.create(make_request(TUESDAY, 10, 12))
    cancelled = Booking(
        id="cancelled-1",
        user_id="u2",
        court_id="c2",
        date=TUESDAY,
        start_hour=10,
        end_hour=12,
        resources=booking.resources,
        status=BookingStatus.CANCELLED,
        pricing=booking.pricing,
        created_at=booking.created_at,
    )
    store.append_booking(cancelled)

    assert AvailabilityChecker(store).check(TUESDAY, 10, 12, "c2").available is True


def test_check_has_no_side_effects(store, writer):
    writer.create(make_request(TUESDAY, 10, 12))
    checker = AvailabilityChecker(store)

    first = checker.check(TUESDAY, 11, 12, "c1")
    second = checker.check(TUESDAY, 11, 12, "c1")

    assert first == second
    assert len(store.list_bookings()) == 1


@pytest.mark.parametrize("start,end", [(10, 10), (12, 10), (-1, 3), (20, 24)])
def test_malformed_ranges_are_rejected(store, start, end):
    with pytest.raises(BookingValidationError):
        AvailabilityChecker(store).check(TUESDAY, start, end, "c1")


def test_overlap_is_half_open():
    assert overlaps(14, 16, 15, 17) is True
    assert overlaps(9, 10, 10, 11) is False
    assert overlaps(10, 11, 9, 10) is False
    assert overlaps(8, 12, 9, 10) is True
