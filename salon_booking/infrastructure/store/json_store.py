from __future__ import annotations

import json
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.domain.entities.booking import Booking, BookingStatus
from salon_booking.infrastructure.store.locks import SalonLockRegistry


class JsonBookingStore(BookingStorePort):
    def __init__(self, data_dir: str = "./data/bookings") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / "bookings.json"
        self._lock = threading.Lock()
        self._salon_locks = SalonLockRegistry()

    def add(self, booking: Booking) -> Booking:
        stored = replace(booking, id=booking.id or uuid.uuid4().hex)
        with self._lock:
            data = self._load()
            data[stored.id] = self._serialize(stored)
            self._save(data)
        return stored

    def update(self, booking: Booking) -> Booking:
        with self._lock:
            data = self._load()
            if booking.id not in data:
                raise KeyError(booking.id)
            data[booking.id] = self._serialize(booking)
            self._save(data)
        return booking

    def get(self, booking_id: str) -> Booking | None:
        with self._lock:
            record = self._load().get(booking_id)
        return self._deserialize(record) if record else None

    def list_by_customer(self, customer_id: str) -> list[Booking]:
        return [b for b in self._all() if b.customer_id == customer_id]

    def list_by_salon(self, salon_id: str) -> list[Booking]:
        return [b for b in self._all() if b.salon_id == salon_id]

    def salon_lock(self, salon_id: str) -> threading.RLock:
        return self._salon_locks.get(salon_id)

    def _all(self) -> list[Booking]:
        with self._lock:
            records = list(self._load().values())
        return [self._deserialize(r) for r in records]

    def _load(self) -> dict[str, dict[str, Any]]:
        """Load all bookings keyed by id, empty if the file is missing."""
        if not self._file_path.exists():
            return {}
        with open(self._file_path, "r", encoding="utf-8") as f:
            return json.load(f).get("bookings", {})

    def _save(self, bookings: dict[str, dict[str, Any]]) -> None:
        """Write all bookings atomically via a temp file."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"version": 1, "bookings": bookings}, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _serialize(self, booking: Booking) -> dict[str, Any]:
        return {
            "id": booking.id,
            "customer_id": booking.customer_id,
            "salon_id": booking.salon_id,
            "start_time": booking.start_time.isoformat(),
            "end_time": booking.end_time.isoformat(),
            "total_price": str(booking.total_price),
            "service_ids": sorted(booking.service_ids),
            "status": booking.status.value,
            "payment_status": booking.payment_status,
            "created_at": booking.created_at.isoformat() if booking.created_at else None,
            "updated_at": booking.updated_at.isoformat() if booking.updated_at else None,
        }

    def _deserialize(self, data: dict[str, Any]) -> Booking:
        return Booking(
            id=data["id"],
            customer_id=data["customer_id"],
            salon_id=data["salon_id"],
            start_time=datetime.fromisoformat(data["start_time"]),
            end_time=datetime.fromisoformat(data["end_time"]),
            total_price=Decimal(data["total_price"]),
            service_ids=frozenset(data.get("service_ids", [])),
            status=BookingStatus(data.get("status", BookingStatus.PENDING.value)),
            payment_status=data.get("payment_status"),
            created_at=_parse_optional(data.get("created_at")),
            updated_at=_parse_optional(data.get("updated_at")),
        )


def _parse_optional(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
