from __future__ import annotations

import json
import threading
from datetime import date
from pathlib import Path
from typing import Any, Callable, TypeVar

from court_booking.application.exceptions import StoreCorruptedError
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.domain.entities.booking import (
    Booking,
    BookingResources,
    BookingStatus,
    PricingBreakdown,
)
from court_booking.domain.entities.coach import Coach
from court_booking.domain.entities.court import Court, CourtType
from court_booking.domain.entities.equipment import Equipment
from court_booking.domain.entities.pricing_rule import PeakHourRule, PricingRule, WeekendRule

COURTS = "courts"
COACHES = "coaches"
EQUIPMENT = "equipment"
RULES = "rules"
BOOKINGS = "bookings"
META = "meta"

T = TypeVar("T")


class JsonReservationStore(ReservationStorePort):
    """One JSON file per entity collection under ``data_dir``."""

    def __init__(self, data_dir: str = "./data/store") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict

    def _get_lock(self, collection: str) -> threading.Lock:
        """Get or create a lock for a collection."""
        with self._lock_lock:
            if collection not in self._locks:
                self._locks[collection] = threading.Lock()
            return self._locks[collection]

    def _get_file_path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _load(self, collection: str) -> Any:
        """Load a collection from disk; a missing file reads as None."""
        file_path = self._get_file_path(collection)
        if not file_path.exists():
            return None
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise StoreCorruptedError(f"Collection '{collection}' is not valid JSON: {e}") from e

    def _save(self, collection: str, data: Any) -> None:
        """Save a collection atomically."""
        file_path = self._get_file_path(collection)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            # Atomic rename
            temp_path.replace(file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _read_records(self, collection: str) -> list[dict[str, Any]]:
        with self._get_lock(collection):
            data = self._load(collection)
        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreCorruptedError(f"Collection '{collection}' must be a JSON list.")
        return data

    def _decode(self, collection: str, deserialize: Callable[[dict[str, Any]], T]) -> list[T]:
        """Deserialize every record; a malformed record marks the collection corrupted."""
        items: list[T] = []
        for index, record in enumerate(self._read_records(collection)):
            try:
                items.append(deserialize(record))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise StoreCorruptedError(
                    f"Record {index} of collection '{collection}' is malformed: {e!r}"
                ) from e
        return items

    def _append_record(self, collection: str, record: dict[str, Any]) -> None:
        with self._get_lock(collection):
            data = self._load(collection) or []
            data.append(record)
            self._save(collection, data)

    def _write_records(self, collection: str, records: list[dict[str, Any]]) -> None:
        with self._get_lock(collection):
            self._save(collection, records)

    # --- Serialization ---

    def _serialize_court(self, court: Court) -> dict[str, Any]:
        return {
            "id": court.id,
            "name": court.name,
            "type": court.type.value,
            "basePrice": court.base_price,
        }

    def _deserialize_court(self, data: dict[str, Any]) -> Court:
        return Court(
            id=data["id"],
            name=data["name"],
            type=CourtType(data["type"]),
            base_price=data["basePrice"],
        )

    def _serialize_coach(self, coach: Coach) -> dict[str, Any]:
        return {
            "id": coach.id,
            "name": coach.name,
            "specialty": coach.specialty,
            "hourlyRate": coach.hourly_rate,
        }

    def _deserialize_coach(self, data: dict[str, Any]) -> Coach:
        return Coach(
            id=data["id"],
            name=data["name"],
            specialty=data.get("specialty", ""),
            hourly_rate=data["hourlyRate"],
        )

    def _serialize_equipment(self, equipment: Equipment) -> dict[str, Any]:
        return {
            "id": equipment.id,
            "name": equipment.name,
            "totalStock": equipment.total_stock,
            "pricePerSession": equipment.price_per_session,
        }

    def _deserialize_equipment(self, data: dict[str, Any]) -> Equipment:
        return Equipment(
            id=data["id"],
            name=data["name"],
            total_stock=data.get("totalStock", 0),
            price_per_session=data["pricePerSession"],
        )

    def _serialize_rule(self, rule: PricingRule) -> dict[str, Any]:
        """Pricing rules are tagged by ``type``."""
        if isinstance(rule, WeekendRule):
            return {
                "id": rule.id,
                "name": rule.name,
                "type": rule.type,
                "surcharge": rule.surcharge,
                "days": sorted(rule.days),
            }
        return {
            "id": rule.id,
            "name": rule.name,
            "type": rule.type,
            "multiplier": rule.multiplier,
            "startTime": rule.start_time,
            "endTime": rule.end_time,
        }

    def _deserialize_rule(self, data: dict[str, Any]) -> PricingRule:
        rule_type = data.get("type")
        if rule_type == WeekendRule.type:
            return WeekendRule(
                id=data["id"],
                name=data.get("name", ""),
                surcharge=data.get("surcharge") or 0,
                days=frozenset(data.get("days") or []),
            )
        if rule_type == PeakHourRule.type:
            return PeakHourRule(
                id=data["id"],
                name=data.get("name", ""),
                multiplier=data.get("multiplier") or 1,
                start_time=data.get("startTime") or "00:00",
                end_time=data.get("endTime") or "00:00",
            )
        raise StoreCorruptedError(f"Unknown pricing rule type: {rule_type!r}")

    def _serialize_booking(self, booking: Booking) -> dict[str, Any]:
        pricing = booking.pricing
        return {
            "id": booking.id,
            "userId": booking.user_id,
            "courtId": booking.court_id,
            "date": booking.date.isoformat(),
            "startTime": booking.start_hour,
            "endTime": booking.end_hour,
            "resources": {
                "rackets": booking.resources.rackets,
                "shoes": booking.resources.shoes,
                "coachId": booking.resources.coach_id,
            },
            "status": booking.status.value,
            "pricingBreakdown": {
                "basePrice": pricing.base_price,
                "weekendFee": pricing.weekend_fee,
                "peakHourFee": pricing.peak_hour_fee,
                "equipmentFee": pricing.equipment_fee,
                "coachFee": pricing.coach_fee,
                "total": pricing.total,
            },
            "timestamp": booking.created_at,
        }

    def _deserialize_booking(self, data: dict[str, Any]) -> Booking:
        resources = data.get("resources") or {}
        pricing = data.get("pricingBreakdown") or {}
        return Booking(
            id=data["id"],
            user_id=data.get("userId", ""),
            court_id=data["courtId"],
            date=date.fromisoformat(data["date"]),
            start_hour=data["startTime"],
            end_hour=data["endTime"],
            resources=BookingResources(
                rackets=resources.get("rackets", 0),
                shoes=resources.get("shoes", 0),
                coach_id=resources.get("coachId"),
            ),
            status=BookingStatus(data.get("status", BookingStatus.CONFIRMED.value)),
            pricing=PricingBreakdown(
                base_price=pricing.get("basePrice", 0),
                weekend_fee=pricing.get("weekendFee", 0),
                peak_hour_fee=pricing.get("peakHourFee", 0),
                equipment_fee=pricing.get("equipmentFee", 0),
                coach_fee=pricing.get("coachFee", 0),
                total=pricing.get("total", 0),
            ),
            created_at=data.get("timestamp", 0.0),
        )

    # --- Port ---

    def is_initialized(self) -> bool:
        with self._get_lock(META):
            meta = self._load(META) or {}
        return bool(meta.get("initialized"))

    def initialize(
        self,
        courts: list[Court],
        coaches: list[Coach],
        equipment: list[Equipment],
        rules: list[PricingRule],
    ) -> bool:
        with self._get_lock(META):
            meta = self._load(META) or {}
            if meta.get("initialized"):
                return False
            self._write_records(COURTS, [self._serialize_court(c) for c in courts])
            self._write_records(COACHES, [self._serialize_coach(c) for c in coaches])
            self._write_records(EQUIPMENT, [self._serialize_equipment(e) for e in equipment])
            self._write_records(RULES, [self._serialize_rule(r) for r in rules])
            self._write_records(BOOKINGS, [])
            self._save(META, {"initialized": True, "version": 1})
        return True

    def list_courts(self) -> list[Court]:
        return self._decode(COURTS, self._deserialize_court)

    def list_coaches(self) -> list[Coach]:
        return self._decode(COACHES, self._deserialize_coach)

    def list_equipment(self) -> list[Equipment]:
        return self._decode(EQUIPMENT, self._deserialize_equipment)

    def list_pricing_rules(self) -> list[PricingRule]:
        return self._decode(RULES, self._deserialize_rule)

    def list_bookings(self) -> list[Booking]:
        return self._decode(BOOKINGS, self._deserialize_booking)

    def append_booking(self, booking: Booking) -> None:
        self._append_record(BOOKINGS, self._serialize_booking(booking))

    def append_equipment(self, equipment: Equipment) -> None:
        self._append_record(EQUIPMENT, self._serialize_equipment(equipment))
