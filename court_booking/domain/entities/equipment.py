from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Equipment:
    id: str
    name: str
    total_stock: int  # informational, bookings never decrement it
    price_per_session: float
