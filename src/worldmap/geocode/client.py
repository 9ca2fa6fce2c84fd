"""Nominatim address search client used by the geocode proxy."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from worldmap.core.config import GeocodeConfig
from worldmap.core.errors import GeocodeTimeoutError, GeocodeUpstreamError

logger = logging.getLogger(__name__)


class NominatimClient:
    """Forwards free-text queries to Nominatim ``/search``.

    Upstream failures are raised, never turned into an empty result, and
    never retried.
    """

    def __init__(self, config: GeocodeConfig | None = None) -> None:
        self.config = config or GeocodeConfig()
        self._http = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.timeout_seconds),
            headers={
                "User-Agent": self.config.user_agent,
                "From": self.config.contact_email,
            },
        )

    async def search(self, query: str) -> Any:
        """Return the upstream candidate list for ``query``.

        A blank query short-circuits to ``[]`` without calling upstream.

        Raises:
            GeocodeTimeoutError: If upstream does not answer in time.
            GeocodeUpstreamError: On a non-success status or transport error.
        """
        if not query or not query.strip():
            return []

        params = {
            "format": "json",
            "addressdetails": 1,
            "limit": self.config.limit,
            "countrycodes": self.config.country_codes,
            "accept-language": self.config.language,
            "q": query,
        }
        try:
            resp = await self._http.get("/search", params=params)
        except httpx.TimeoutException as exc:
            logger.warning("Nominatim timed out after %ss", self.config.timeout_seconds)
            raise GeocodeTimeoutError(f"Nominatim timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Nominatim request failed: %s", exc)
            raise GeocodeUpstreamError(f"Nominatim request failed: {exc}") from exc

        if not resp.is_success:
            logger.warning("Nominatim answered %s", resp.status_code)
            raise GeocodeUpstreamError(
                f"Nominatim: {resp.status_code}", status_code=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise GeocodeUpstreamError(
                f"Nominatim returned invalid JSON: {exc}", status_code=resp.status_code
            ) from exc

    async def close(self) -> None:
        await self._http.aclose()
