from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from salon_booking.application.exceptions import UpstreamServiceError
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.domain.entities.service_offering import ServiceOffering
from salon_booking.infrastructure.remote.http_json import JsonHttpClient


class ServiceCatalogClient(ServiceCatalogPort):
    def __init__(self, http: JsonHttpClient) -> None:
        self._http = http

    def get_services_by_ids(self, service_ids: Iterable[str]) -> list[ServiceOffering]:
        ids = ",".join(str(s) for s in service_ids)
        if not ids:
            return []
        data = self._http.get_json(f"/api/service-offering/list/{ids}")
        return [parse_service(item) for item in data or []]


def parse_service(data: dict[str, Any]) -> ServiceOffering:
    try:
        return ServiceOffering(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            duration_minutes=int(data["duration"]),
            price=Decimal(str(data["price"])),
            salon_id=str(data["salonId"]) if data.get("salonId") is not None else None,
        )
    except (KeyError, ValueError, ArithmeticError) as e:
        raise UpstreamServiceError(f"Malformed service offering payload: {e}") from e
