"""
Tests for the httpx clients of the salon, catalog and user services.
"""

from __future__ import annotations

from datetime import time
from decimal import Decimal

import httpx
import pytest

from salon_booking.application.exceptions import UpstreamServiceError
from salon_booking.infrastructure.remote.catalog_client import ServiceCatalogClient
from salon_booking.infrastructure.remote.http_json import JsonHttpClient
from salon_booking.infrastructure.remote.salon_client import SalonServiceClient
from salon_booking.infrastructure.remote.user_client import UserServiceClient


def _http(handler) -> JsonHttpClient:
    return JsonHttpClient("http://collaborator", client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_salon_client_parses_hours_and_forwards_token():
    """Salon payloads become Salon entities and the caller's token is passed through."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        seen["path"] = request.url.path
        return httpx.Response(200, json={"id": 7, "name": "Glow", "openTime": "09:00:00", "closeTime": "18:30:00", "ownerId": 3})

    salon = SalonServiceClient(_http(handler)).get_salon("7", token="Bearer abc")

    assert seen == {"auth": "Bearer abc", "path": "/api/salons/7"}
    assert salon.id == "7"
    assert salon.open_time == time(9, 0)
    assert salon.close_time == time(18, 30)
    assert salon.owner_id == "3"


def test_missing_salon_returns_none():
    """A 404 from the salon service means the caller owns no salon."""
    client = SalonServiceClient(_http(lambda request: httpx.Response(404)))
    assert client.get_salon_by_owner("Bearer abc") is None


def test_server_error_raises_upstream_error():
    """5xx responses surface as UpstreamServiceError."""
    client = SalonServiceClient(_http(lambda request: httpx.Response(503, text="down")))
    with pytest.raises(UpstreamServiceError):
        client.get_salon("7")


def test_transport_error_raises_upstream_error():
    """Timeouts and connection errors surface as UpstreamServiceError."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(UpstreamServiceError):
        UserServiceClient(_http(handler)).get_user_from_token("Bearer t")


def test_catalog_client_parses_offerings():
    """Service offerings are fetched in one call and prices become Decimals."""
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/service-offering/list/1,2"
        return httpx.Response(
            200,
            json=[
                {"id": 1, "name": "Cut", "duration": 30, "price": 25},
                {"id": 2, "name": "Trim", "duration": 15, "price": 12.5},
            ],
        )

    offerings = ServiceCatalogClient(_http(handler)).get_services_by_ids(["1", "2"])

    assert [(o.id, o.duration_minutes, o.price) for o in offerings] == [
        ("1", 30, Decimal("25")),
        ("2", 15, Decimal("12.5")),
    ]


def test_user_client_resolves_profile_from_token():
    """The caller's profile is looked up with their Authorization header."""
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/users/profile"
        return httpx.Response(200, json={"id": 5, "email": "a@b.c", "fullName": "Ann"})

    user = UserServiceClient(_http(handler)).get_user_from_token("Bearer t")

    assert (user.id, user.email, user.full_name) == ("5", "a@b.c", "Ann")
