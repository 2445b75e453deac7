from __future__ import annotations

from typing import Any

from salon_booking.application.ports.user_directory import UserDirectoryPort
from salon_booking.domain.entities.customer import Customer
from salon_booking.infrastructure.remote.http_json import JsonHttpClient


class UserServiceClient(UserDirectoryPort):
    def __init__(self, http: JsonHttpClient) -> None:
        self._http = http

    def get_user_from_token(self, token: str) -> Customer | None:
        data = self._http.get_json("/api/users/profile", token=token)
        return _parse_user(data) if data else None


def _parse_user(data: dict[str, Any]) -> Customer:
    return Customer(
        id=str(data["id"]),
        email=data.get("email"),
        full_name=data.get("fullName") or data.get("full_name"),
    )
