#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py

Runs the same use cases the API uses against the store selected by settings
(JSON store under DATA_DIR for ENV=dev/local).
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from court_booking.application.dto.booking_request import BookingRequest
from court_booking.application.exceptions import CourtBookingError
from court_booking.core.config import settings
from court_booking.domain.entities.booking import BookingResources
from court_booking.wiring.dependencies import (
    get_booking_writer,
    get_pricing_calculator,
    get_revenue_report_builder,
    get_slot_grid,
    get_store,
)

HELP = """Commands:
  /courts                                   -> list courts
  /slots <court_id> <YYYY-MM-DD>            -> show hour grid
  /price <court_id> <YYYY-MM-DD> <start> <end> [rackets] [shoes] [coach_id]
  /book  <court_id> <YYYY-MM-DD> <start> <end> [rackets] [shoes] [coach_id]
  /revenue                                  -> revenue summary
  /quit"""


def _parse_request(args: list[str]) -> BookingRequest:
    if len(args) < 4:
        raise ValueError("expected <court_id> <date> <start> <end>")
    return BookingRequest(
        user_id=settings.DEFAULT_USER_ID,
        court_id=args[0],
        date=date.fromisoformat(args[1]),
        start_hour=int(args[2]),
        end_hour=int(args[3]),
        resources=BookingResources(
            rackets=int(args[4]) if len(args) > 4 else 0,
            shoes=int(args[5]) if len(args) > 5 else 0,
            coach_id=args[6] if len(args) > 6 else None,
        ),
    )


def _run(cmd: str, args: list[str]) -> None:
    if cmd == "/courts":
        for court in get_store().list_courts():
            print(f"{court.id}: {court.name} ({court.type.value}) {court.base_price}/h")
    elif cmd == "/slots":
        for slot in get_slot_grid(get_store()).for_court(args[0], date.fromisoformat(args[1])):
            print(f"{slot.hour:02d}:00  {'booked' if slot.booked else 'free'}")
    elif cmd == "/price":
        req = _parse_request(args)
        print(get_pricing_calculator(get_store()).preview(req.court_id, req.date, req.start_hour, req.end_hour, req.resources))
    elif cmd == "/book":
        booking = get_booking_writer(get_store()).create(_parse_request(args))
        print(f"Booked {booking.id}: total {booking.pricing.total:.2f}")
    elif cmd == "/revenue":
        report = get_revenue_report_builder(get_store()).build(settings.REVENUE_TREND_DAYS)
        print(f"total: {report.total_revenue:.2f}  confirmed: {report.confirmed_bookings}")
        for day in report.daily:
            print(f"  {day.date.isoformat()}  {day.revenue:.2f}")
    else:
        print(HELP)


def main() -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print(HELP)
    print("-" * 60)

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue
        cmd, *args = line.split()
        if cmd.lower() in ("/quit", "/exit"):
            print("Bye!")
            return

        try:
            _run(cmd.lower(), args)
        except CourtBookingError as e:
            print(f"Rejected: {e}")
        except (ValueError, IndexError) as e:
            print(f"Bad input: {e}")


if __name__ == "__main__":
    main()
