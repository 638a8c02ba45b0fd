from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coach:
    id: str
    name: str
    specialty: str
    hourly_rate: float
