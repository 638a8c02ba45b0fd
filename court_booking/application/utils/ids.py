from __future__ import annotations

import uuid
from collections.abc import Container


def new_booking_id() -> str:
    return uuid.uuid4().hex


def new_equipment_id(existing: Container[str]) -> str:
    while True:
        candidate = f"eq_{uuid.uuid4().hex[:9]}"
        if candidate not in existing:
            return candidate
