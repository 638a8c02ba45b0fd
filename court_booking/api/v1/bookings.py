from fastapi import APIRouter, Depends

from court_booking.api.v1.errors import to_http_error
from court_booking.api.v1.schemas import (
    AvailabilityRequestSchema,
    AvailabilityResponseSchema,
    BookingSchema,
    CreateBookingRequestSchema,
    PricePreviewRequestSchema,
    PricingBreakdownSchema,
    ResourcesSchema,
)
from court_booking.application.dto.booking_request import BookingRequest
from court_booking.application.exceptions import CourtBookingError
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.use_cases.calculate_price import PricingCalculator
from court_booking.application.use_cases.check_availability import AvailabilityChecker
from court_booking.application.use_cases.create_booking import BookingWriter
from court_booking.core.config import settings
from court_booking.domain.entities.booking import BookingResources
from court_booking.wiring.dependencies import (
    get_availability_checker,
    get_booking_writer,
    get_pricing_calculator,
    get_store,
)

router = APIRouter()


def _resources(schema: ResourcesSchema) -> BookingResources:
    return BookingResources(rackets=schema.rackets, shoes=schema.shoes, coach_id=schema.coach_id or None)


@router.post("/availability", response_model=AvailabilityResponseSchema)
def check_availability(
    req: AvailabilityRequestSchema,
    checker: AvailabilityChecker = Depends(get_availability_checker),
):
    try:
        result = checker.check(req.date, req.start_hour, req.end_hour, req.court_id, req.coach_id or None)
    except CourtBookingError as e:
        raise to_http_error(e)
    return AvailabilityResponseSchema(available=result.available, reason=result.reason)


@router.post("/pricing/preview", response_model=PricingBreakdownSchema)
def preview_price(
    req: PricePreviewRequestSchema,
    calculator: PricingCalculator = Depends(get_pricing_calculator),
):
    try:
        breakdown = calculator.preview(
            req.court_id, req.date, req.start_hour, req.end_hour, _resources(req.resources)
        )
    except CourtBookingError as e:
        raise to_http_error(e)
    return PricingBreakdownSchema.model_validate(breakdown)


@router.get("/bookings", response_model=list[BookingSchema])
def list_bookings(store: ReservationStorePort = Depends(get_store)):
    return [BookingSchema.model_validate(b) for b in store.list_bookings()]


@router.post("/bookings", response_model=BookingSchema, status_code=201)
def create_booking(
    req: CreateBookingRequestSchema,
    writer: BookingWriter = Depends(get_booking_writer),
):
    try:
        booking = writer.create(
            BookingRequest(
                user_id=req.user_id or settings.DEFAULT_USER_ID,
                court_id=req.court_id,
                date=req.date,
                start_hour=req.start_hour,
                end_hour=req.end_hour,
                resources=_resources(req.resources),
            )
        )
    except CourtBookingError as e:
        raise to_http_error(e)
    return BookingSchema.model_validate(booking)
