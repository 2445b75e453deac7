from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_booking.application.exceptions import UpstreamServiceError


class JsonHttpClient:
    """GET-only JSON client shared by the collaborator adapters."""

    def __init__(self, base_url: str, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def get_json(self, path: str, token: str | None = None, params: dict[str, Any] | None = None) -> Any | None:
        """Returns parsed JSON, or None on 404. Other failures raise UpstreamServiceError."""
        url = f"{self._base_url}{path}"
        headers = {"Authorization": token} if token else {}
        try:
            resp = self._client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Remote call failed", extra={"url": url, "reason": str(e)})
            raise UpstreamServiceError(f"GET {url} failed: {e}") from e

        if resp.status_code == 404:
            return None
        if resp.status_code >= 400:
            self._logger.error(
                "Remote call returned error",
                extra={"url": url, "status": resp.status_code, "reason": resp.text[:200]},
            )
            raise UpstreamServiceError(f"GET {url} returned {resp.status_code}")

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamServiceError(f"GET {url} returned invalid JSON") from e
