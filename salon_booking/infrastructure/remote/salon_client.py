from __future__ import annotations

from datetime import time
from typing import Any

from salon_booking.application.exceptions import UpstreamServiceError
from salon_booking.application.ports.salon_directory import SalonDirectoryPort
from salon_booking.domain.entities.salon import Salon
from salon_booking.infrastructure.remote.http_json import JsonHttpClient


class SalonServiceClient(SalonDirectoryPort):
    def __init__(self, http: JsonHttpClient) -> None:
        self._http = http

    def get_salon(self, salon_id: str, token: str | None = None) -> Salon | None:
        data = self._http.get_json(f"/api/salons/{salon_id}", token=token)
        return parse_salon(data) if data else None

    def get_salon_by_owner(self, token: str) -> Salon | None:
        data = self._http.get_json("/api/salons/owner", token=token)
        return parse_salon(data) if data else None


def parse_salon(data: dict[str, Any]) -> Salon:
    try:
        return Salon(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            open_time=time.fromisoformat(str(data.get("openTime") or data["open_time"])),
            close_time=time.fromisoformat(str(data.get("closeTime") or data["close_time"])),
            owner_id=str(data["ownerId"]) if data.get("ownerId") is not None else None,
        )
    except (KeyError, ValueError) as e:
        raise UpstreamServiceError(f"Salon payload is missing opening hours: {e}") from e
