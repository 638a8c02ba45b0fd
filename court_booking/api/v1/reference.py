from datetime import date

from fastapi import APIRouter, Depends, Query

from court_booking.api.v1.errors import to_http_error
from court_booking.api.v1.schemas import (
    CoachSchema,
    CourtSchema,
    EquipmentSchema,
    PricingRuleSchema,
    SlotSchema,
)
from court_booking.application.exceptions import CourtBookingError
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.use_cases.slot_grid import SlotGrid
from court_booking.domain.entities.pricing_rule import WeekendRule
from court_booking.wiring.dependencies import get_slot_grid, get_store

router = APIRouter()


@router.get("/courts", response_model=list[CourtSchema])
def list_courts(store: ReservationStorePort = Depends(get_store)):
    return [CourtSchema.model_validate(c) for c in store.list_courts()]


@router.get("/coaches", response_model=list[CoachSchema])
def list_coaches(store: ReservationStorePort = Depends(get_store)):
    return [CoachSchema.model_validate(c) for c in store.list_coaches()]


@router.get("/equipment", response_model=list[EquipmentSchema])
def list_equipment(store: ReservationStorePort = Depends(get_store)):
    return [EquipmentSchema.model_validate(e) for e in store.list_equipment()]


@router.get("/pricing-rules", response_model=list[PricingRuleSchema])
def list_pricing_rules(store: ReservationStorePort = Depends(get_store)):
    rules = []
    for rule in store.list_pricing_rules():
        if isinstance(rule, WeekendRule):
            rules.append(
                PricingRuleSchema(
                    id=rule.id,
                    name=rule.name,
                    type=rule.type,
                    surcharge=rule.surcharge,
                    days=sorted(rule.days),
                )
            )
        else:
            rules.append(
                PricingRuleSchema(
                    id=rule.id,
                    name=rule.name,
                    type=rule.type,
                    multiplier=rule.multiplier,
                    start_time=rule.start_time,
                    end_time=rule.end_time,
                )
            )
    return rules


@router.get("/courts/{court_id}/slots", response_model=list[SlotSchema])
def court_slots(
    court_id: str,
    day: date = Query(..., alias="date"),
    grid: SlotGrid = Depends(get_slot_grid),
):
    try:
        slots = grid.for_court(court_id, day)
    except CourtBookingError as e:
        raise to_http_error(e)
    return [SlotSchema.model_validate(s) for s in slots]
