from datetime import date
from pydantic import BaseModel, ConfigDict, Field

from court_booking.domain.entities.booking import BookingStatus
from court_booking.domain.entities.court import CourtType


class CourtSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: CourtType
    base_price: float


class CoachSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    specialty: str
    hourly_rate: float


class EquipmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    total_stock: int
    price_per_session: float


class PricingRuleSchema(BaseModel):
    id: str
    name: str
    type: str
    surcharge: float | None = None
    days: list[int] | None = None
    multiplier: float | None = None
    start_time: str | None = None
    end_time: str | None = None


class SlotSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hour: int
    booked: bool


class ResourcesSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    rackets: int = 0
    shoes: int = 0
    coach_id: str | None = None


class AvailabilityRequestSchema(BaseModel):
    date: date
    start_hour: int
    end_hour: int
    court_id: str
    coach_id: str | None = None


class AvailabilityResponseSchema(BaseModel):
    available: bool
    reason: str | None = None


class PricePreviewRequestSchema(BaseModel):
    court_id: str
    date: date
    start_hour: int
    end_hour: int
    resources: ResourcesSchema = Field(default_factory=ResourcesSchema)


class PricingBreakdownSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    base_price: float
    weekend_fee: float
    peak_hour_fee: float
    equipment_fee: float
    coach_fee: float
    total: float


class CreateBookingRequestSchema(BaseModel):
    user_id: str | None = None
    court_id: str
    date: date
    start_hour: int
    end_hour: int
    resources: ResourcesSchema = Field(default_factory=ResourcesSchema)


class BookingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    court_id: str
    date: date
    start_hour: int
    end_hour: int
    resources: ResourcesSchema
    status: BookingStatus
    pricing: PricingBreakdownSchema
    created_at: float


class AddEquipmentRequestSchema(BaseModel):
    name: str
    total_stock: int = 0
    price_per_session: float = 0.0


class DailyRevenueSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    revenue: float


class RevenueReportSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_revenue: float
    confirmed_bookings: int
    total_bookings: int
    daily: list[DailyRevenueSchema] = Field(default_factory=list)
