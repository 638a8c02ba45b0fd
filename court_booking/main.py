import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from court_booking.api.v1.admin import router as admin_router
from court_booking.api.v1.errors import to_http_error
from court_booking.api.v1.bookings import router as bookings_router
from court_booking.api.v1.reference import router as reference_router
from court_booking.application.exceptions import CourtBookingError
from court_booking.core.config import settings
from court_booking.wiring.dependencies import init_store


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "court_id", "coach_id", "booking_date", "reason", "equipment_id"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Store is built and seeded before the first request is served.
    init_store()
    yield


app = FastAPI(title="Court Booking", version="1.0.0", lifespan=lifespan)

app.include_router(reference_router, prefix="/api/v1", tags=["reference"])
app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])
app.include_router(admin_router, prefix="/api/v1/admin", tags=["admin"])


@app.exception_handler(CourtBookingError)
async def court_booking_error_handler(request: Request, exc: CourtBookingError) -> JSONResponse:
    error = to_http_error(exc)
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
