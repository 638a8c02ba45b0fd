from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CourtType(str, Enum):
    INDOOR = "Indoor"
    OUTDOOR = "Outdoor"


@dataclass(frozen=True)
class Court:
    id: str
    name: str
    type: CourtType
    base_price: float  # per hour
