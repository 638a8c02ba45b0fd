from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class WeekendRule:
    id: str
    name: str
    surcharge: float = 0.0  # per hour
    days: frozenset[int] = field(default_factory=frozenset)  # 0=Sunday .. 6=Saturday

    type = "WEEKEND"


@dataclass(frozen=True)
class PeakHourRule:
    id: str
    name: str
    multiplier: float = 1.0
    start_time: str = "00:00"  # HH:MM
    end_time: str = "00:00"  # HH:MM

    type = "PEAK_HOUR"

    @property
    def start_hour(self) -> int | None:
        return _hour_of(self.start_time)

    @property
    def end_hour(self) -> int | None:
        return _hour_of(self.end_time)


PricingRule = Union[WeekendRule, PeakHourRule]


_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def _hour_of(value: str) -> int | None:
    """Leading hour digits of an "HH:MM" string, or None when there are none."""
    match = _LEADING_DIGITS.match(value or "")
    return int(match.group(1)) if match else None
