from __future__ import annotations

import logging
import time

from court_booking.application.dto.booking_request import BookingRequest
from court_booking.application.exceptions import (
    BookingValidationError,
    NotFoundError,
    SlotUnavailableError,
)
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.use_cases.calculate_price import PricingCalculator
from court_booking.application.use_cases.check_availability import AvailabilityChecker
from court_booking.application.utils.ids import new_booking_id
from court_booking.application.utils.keyed_locks import KeyedLocks, LockKey
from court_booking.domain.entities.booking import Booking, BookingStatus


class BookingWriter:
    def __init__(
        self,
        store: ReservationStorePort,
        availability: AvailabilityChecker,
        pricing: PricingCalculator,
        locks: KeyedLocks | None = None,
    ) -> None:
        self._store = store
        self._availability = availability
        self._pricing = pricing
        self._locks = locks if locks is not None else KeyedLocks()
        self._logger = logging.getLogger(__name__)

    def create(self, request: BookingRequest) -> Booking:
        """
        Check, price and append a confirmed booking.

        The availability check and the append run under the (court, date) lock
        and, when a coach is requested, the (coach, date) lock, so writers sharing
        this lock registry cannot both pass the check for the same slot.
        """
        if not request.user_id:
            raise BookingValidationError("User id is required.")
        if request.resources.rackets < 0 or request.resources.shoes < 0:
            raise BookingValidationError("Equipment counts cannot be negative.")

        with self._locks.hold(_lock_keys(request)):
            result = self._availability.check(
                request.date,
                request.start_hour,
                request.end_hour,
                request.court_id,
                request.resources.coach_id,
            )
            if not result.available:
                self._logger.warning(
                    "Booking rejected",
                    extra={
                        "court_id": request.court_id,
                        "coach_id": request.resources.coach_id,
                        "booking_date": request.date.isoformat(),
                        "reason": result.reason,
                    },
                )
                raise SlotUnavailableError(result.reason or "Slot is unavailable.")

            court = self._store.get_court(request.court_id)
            if not court:
                raise NotFoundError("Court not found")

            pricing = self._pricing.calculate(
                court,
                request.date,
                request.start_hour,
                request.end_hour,
                request.resources,
            )
            booking = Booking(
                id=new_booking_id(),
                user_id=request.user_id,
                court_id=court.id,
                date=request.date,
                start_hour=request.start_hour,
                end_hour=request.end_hour,
                resources=request.resources,
                status=BookingStatus.CONFIRMED,
                pricing=pricing,
                created_at=time.time(),
            )
            self._store.append_booking(booking)

        self._logger.info(
            "Booking confirmed",
            extra={
                "booking_id": booking.id,
                "court_id": booking.court_id,
                "coach_id": booking.resources.coach_id,
                "booking_date": booking.date.isoformat(),
            },
        )
        return booking


def _lock_keys(request: BookingRequest) -> list[LockKey]:
    day = request.date.isoformat()
    keys: list[LockKey] = [("court", request.court_id, day)]
    if request.resources.coach_id:
        keys.append(("coach", request.resources.coach_id, day))
    return keys
