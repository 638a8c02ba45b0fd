from __future__ import annotations

from datetime import date

from court_booking.application.exceptions import BookingValidationError

FIRST_HOUR = 0
LAST_HOUR = 23


def overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Half-open overlap test: ranges sharing only an endpoint do not overlap."""
    return start_a < end_b and end_a > start_b


def validate_hour_range(start_hour: int, end_hour: int) -> None:
    for value in (start_hour, end_hour):
        if isinstance(value, bool) or not isinstance(value, int):
            raise BookingValidationError(f"Hours must be integers, got {value!r}.")
        if not FIRST_HOUR <= value <= LAST_HOUR:
            raise BookingValidationError(
                f"Hours must be between {FIRST_HOUR} and {LAST_HOUR}, got {value}."
            )
    if start_hour >= end_hour:
        raise BookingValidationError("Start hour must be before end hour.")


def sunday_first_weekday(day: date) -> int:
    """Weekday number with 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7
