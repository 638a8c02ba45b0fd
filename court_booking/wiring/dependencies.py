from functools import lru_cache
import logging
import threading

from fastapi import Depends

from court_booking.core.config import settings
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.use_cases.calculate_price import PricingCalculator
from court_booking.application.use_cases.check_availability import AvailabilityChecker
from court_booking.application.use_cases.create_booking import BookingWriter
from court_booking.application.use_cases.manage_equipment import EquipmentCatalog
from court_booking.application.use_cases.revenue_report import RevenueReportBuilder
from court_booking.application.use_cases.seed_reference_data import SeedReferenceData
from court_booking.application.use_cases.slot_grid import SlotGrid
from court_booking.application.utils.keyed_locks import KeyedLocks
from court_booking.infrastructure.store.json_store import JsonReservationStore
from court_booking.infrastructure.store.memory_store import MemoryReservationStore
from court_booking.infrastructure.store.seed_data import (
    SEED_COACHES,
    SEED_COURTS,
    SEED_EQUIPMENT,
    SEED_RULES,
)


_store: ReservationStorePort | None = None
_store_lock = threading.Lock()


def build_store() -> ReservationStorePort:
    logger = logging.getLogger(__name__)
    if settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using JsonReservationStore at %s", settings.DATA_DIR)
        store: ReservationStorePort = JsonReservationStore(data_dir=settings.DATA_DIR)
    else:
        logger.info("Using MemoryReservationStore (ENV=%s)", settings.ENV)
        store = MemoryReservationStore()
    if settings.SEED_REFERENCE_DATA:
        seed_store(store)
    return store


def init_store() -> ReservationStorePort:
    """Build and seed the process-wide store once; later calls return the same one."""
    global _store
    with _store_lock:
        if _store is None:
            _store = build_store()
        return _store


def get_store() -> ReservationStorePort:
    if _store is not None:
        return _store
    return init_store()


def seed_store(store: ReservationStorePort) -> bool:
    return SeedReferenceData(
        store=store,
        courts=SEED_COURTS,
        coaches=SEED_COACHES,
        equipment=SEED_EQUIPMENT,
        rules=SEED_RULES,
    ).execute()


@lru_cache
def get_booking_locks() -> KeyedLocks:
    return KeyedLocks()


def get_availability_checker(store: ReservationStorePort = Depends(get_store)) -> AvailabilityChecker:
    return AvailabilityChecker(store=store)


def get_pricing_calculator(store: ReservationStorePort = Depends(get_store)) -> PricingCalculator:
    return PricingCalculator(store=store)


def get_booking_writer(store: ReservationStorePort = Depends(get_store)) -> BookingWriter:
    return BookingWriter(
        store=store,
        availability=AvailabilityChecker(store=store),
        pricing=PricingCalculator(store=store),
        locks=get_booking_locks(),
    )


def get_equipment_catalog(store: ReservationStorePort = Depends(get_store)) -> EquipmentCatalog:
    return EquipmentCatalog(store=store)


def get_revenue_report_builder(store: ReservationStorePort = Depends(get_store)) -> RevenueReportBuilder:
    return RevenueReportBuilder(store=store)


def get_slot_grid(store: ReservationStorePort = Depends(get_store)) -> SlotGrid:
    return SlotGrid(
        store=store,
        open_hour=settings.OPEN_HOUR,
        close_hour=settings.CLOSE_HOUR,
    )
