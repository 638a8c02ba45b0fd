#!/usr/bin/env python3
"""Smoke test against a running server (uvicorn court_booking.main:app --port 8001)."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8001"


def check_reference_data() -> str | None:
    print("=" * 60)
    print("Testing GET /api/v1/courts")
    print("=" * 60)
    try:
        response = httpx.get(f"{BASE_URL}/api/v1/courts", timeout=10.0)
        response.raise_for_status()
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return None

    courts = response.json()
    print(f"✅ {len(courts)} courts")
    return courts[0]["id"] if courts else None


def check_preview_and_book(court_id: str, day: str) -> bool:
    print("=" * 60)
    print("Testing POST /api/v1/pricing/preview and /api/v1/bookings")
    print("=" * 60)
    payload = {
        "court_id": court_id,
        "date": day,
        "start_hour": 17,
        "end_hour": 19,
        "resources": {"rackets": 2, "shoes": 1},
    }
    try:
        preview = httpx.post(f"{BASE_URL}/api/v1/pricing/preview", json=payload, timeout=10.0)
        preview.raise_for_status()
        print(f"Preview: {preview.json()}")

        booked = httpx.post(f"{BASE_URL}/api/v1/bookings", json=payload, timeout=10.0)
        if booked.status_code == 409:
            print(f"⚠️  Slot already taken: {booked.json()['detail']}")
            return True
        booked.raise_for_status()
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False

    booking = booked.json()
    print(f"✅ Booking {booking['id']} total={booking['pricing']['total']}")
    return True


def main() -> int:
    day = sys.argv[1] if len(sys.argv) > 1 else "2030-01-05"
    court_id = check_reference_data()
    if not court_id:
        return 1
    return 0 if check_preview_and_book(court_id, day) else 1


if __name__ == "__main__":
    sys.exit(main())
