"""US Census geocoder client: one-line address to coordinates."""

import logging
from typing import Any

import httpx

from geoforecast.config.defaults import (
    CENSUS_BASE_URL,
    DEFAULT_BENCHMARK,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from geoforecast.models.errors import InvalidInputError, ReasonCode, UpstreamDataMissing
from geoforecast.models.forecast import Coordinates

logger = logging.getLogger(__name__)

ONELINE_PATH = "/geocoder/locations/onelineaddress"


class CensusGeocoder:
    def __init__(
        self,
        base_url: str = CENSUS_BASE_URL,
        benchmark: str = DEFAULT_BENCHMARK,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url
        self.benchmark = benchmark
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"User-Agent": user_agent},
            timeout=timeout,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def resolve(self, address: str | None) -> Coordinates | None:
        """Geocode a free-form address. Returns None if there is no match.

        Transport errors and cancellation propagate to the caller.
        """
        if address is None or not address.strip():
            raise InvalidInputError("Address is required")

        params = {
            "address": address,
            "benchmark": self.benchmark,
            "format": "json",
        }
        resp = await self._client.get(ONELINE_PATH, params=params)
        if not resp.is_success:
            # Any non-2xx is reported as "no match", so a geocoder outage looks
            # like an unknown address. Kept for compatibility with existing clients.
            logger.warning(
                "Census geocoder returned %d for address=%r; treating as no match",
                resp.status_code, address,
            )
            return None

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamDataMissing(
                ReasonCode.GEOCODE_INVALID_JSON,
                "Census geocoder returned a non-JSON body",
            ) from e

        return _extract_coordinates(payload)


def _extract_coordinates(payload: Any) -> Coordinates | None:
    """Walk result.addressMatches[0].coordinates.{x,y}; x is longitude."""
    result = payload.get("result") if isinstance(payload, dict) else None
    if not isinstance(result, dict):
        raise UpstreamDataMissing(
            ReasonCode.GEOCODE_RESULT_MISSING,
            "Census geocoder response missing 'result' object",
        )

    matches = result.get("addressMatches")
    if not isinstance(matches, list) or not matches:
        return None

    first = matches[0]
    coords = first.get("coordinates") if isinstance(first, dict) else None
    if not isinstance(coords, dict):
        raise UpstreamDataMissing(
            ReasonCode.GEOCODE_COORDINATES_MISSING,
            "Census address match missing 'coordinates'",
        )

    x = coords.get("x")
    y = coords.get("y")
    if not _is_number(x) or not _is_number(y):
        raise UpstreamDataMissing(
            ReasonCode.GEOCODE_COORDINATES_MISSING,
            f"Census coordinates not numeric: x={x!r} y={y!r}",
        )

    return Coordinates(latitude=float(y), longitude=float(x))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
