from __future__ import annotations

import logging

from court_booking.application.exceptions import BookingValidationError
from court_booking.application.ports.reservation_store import ReservationStorePort
from court_booking.application.utils.ids import new_equipment_id
from court_booking.domain.entities.equipment import Equipment


class EquipmentCatalog:
    def __init__(self, store: ReservationStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def list_all(self) -> list[Equipment]:
        return self._store.list_equipment()

    def add(self, name: str, total_stock: int, price_per_session: float) -> Equipment:
        name = (name or "").strip()
        if not name:
            raise BookingValidationError("Equipment name is required.")
        if total_stock < 0 or price_per_session < 0:
            raise BookingValidationError("Stock and price cannot be negative.")

        existing_ids = {item.id for item in self._store.list_equipment()}
        equipment = Equipment(
            id=new_equipment_id(existing_ids),
            name=name,
            total_stock=total_stock,
            price_per_session=price_per_session,
        )
        self._store.append_equipment(equipment)
        self._logger.info("Equipment added", extra={"equipment_id": equipment.id})
        return equipment
