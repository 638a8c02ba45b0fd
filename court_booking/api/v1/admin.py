from fastapi import APIRouter, Depends, Query

from court_booking.api.v1.errors import to_http_error
from court_booking.api.v1.schemas import (
    AddEquipmentRequestSchema,
    EquipmentSchema,
    RevenueReportSchema,
)
from court_booking.application.exceptions import CourtBookingError
from court_booking.application.use_cases.manage_equipment import EquipmentCatalog
from court_booking.application.use_cases.revenue_report import RevenueReportBuilder
from court_booking.core.config import settings
from court_booking.wiring.dependencies import get_equipment_catalog, get_revenue_report_builder

router = APIRouter()


@router.get("/revenue", response_model=RevenueReportSchema)
def revenue_report(
    days: int | None = Query(None, ge=0),
    builder: RevenueReportBuilder = Depends(get_revenue_report_builder),
):
    try:
        report = builder.build(trend_days=settings.REVENUE_TREND_DAYS if days is None else days)
    except CourtBookingError as e:
        raise to_http_error(e)
    return RevenueReportSchema.model_validate(report)


@router.post("/equipment", response_model=EquipmentSchema, status_code=201)
def add_equipment(
    req: AddEquipmentRequestSchema,
    catalog: EquipmentCatalog = Depends(get_equipment_catalog),
):
    try:
        equipment = catalog.add(req.name, req.total_stock, req.price_per_session)
    except CourtBookingError as e:
        raise to_http_error(e)
    return EquipmentSchema.model_validate(equipment)
