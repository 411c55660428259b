"""NWS (api.weather.gov) client: coordinates to normalized forecast periods."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

import httpx

from geoforecast.config.defaults import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    NWS_BASE_URL,
)
from geoforecast.models.errors import (
    ReasonCode,
    UpstreamDataMissing,
    UpstreamFetchFailed,
    UpstreamLookupFailed,
)
from geoforecast.models.forecast import DailyForecast

logger = logging.getLogger(__name__)


class NwsClient:
    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url
        # /points redirects when coordinates carry more than four decimals
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"User-Agent": user_agent, "Accept": "application/geo+json"},
            timeout=timeout,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def forecast(self, latitude: float, longitude: float) -> list[DailyForecast]:
        """Resolve the gridpoint forecast URL for a point, then fetch and normalize it."""
        forecast_url = await self.get_forecast_url(latitude, longitude)
        payload = await self._get_json(
            forecast_url, UpstreamFetchFailed, ReasonCode.FORECAST_FETCH_FAILED, "forecast fetch"
        )
        return parse_periods(payload)

    async def get_forecast_url(self, latitude: float, longitude: float) -> str:
        # locale-independent plain decimal: '.' point, no grouping, no exponent
        path = f"/points/{format_coordinate(latitude)},{format_coordinate(longitude)}"
        payload = await self._get_json(
            path, UpstreamLookupFailed, ReasonCode.POINTS_LOOKUP_FAILED, "points lookup"
        )

        properties = payload.get("properties")
        if not isinstance(properties, dict):
            raise UpstreamDataMissing(
                ReasonCode.FORECAST_URL_MISSING,
                "NWS points response missing 'properties' object",
            )
        forecast_url = properties.get("forecast")
        if not isinstance(forecast_url, str) or not forecast_url.strip():
            raise UpstreamDataMissing(
                ReasonCode.FORECAST_URL_MISSING,
                "NWS points response missing forecast URL",
            )
        return forecast_url.strip()

    async def _get_json(
        self,
        url: str,
        error_cls: type[UpstreamLookupFailed] | type[UpstreamFetchFailed],
        reason: ReasonCode,
        context: str,
    ) -> dict[str, Any]:
        resp = await self._client.get(url)
        if not resp.is_success:
            raise error_cls(
                reason,
                f"NWS {context} failed (status {resp.status_code})",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamDataMissing(
                ReasonCode.INVALID_JSON, f"NWS {context} returned a non-JSON body"
            ) from e
        if not isinstance(payload, dict):
            raise UpstreamDataMissing(
                ReasonCode.INVALID_JSON,
                f"NWS {context} returned {type(payload).__name__}, expected object",
            )
        return payload


def parse_periods(payload: dict[str, Any]) -> list[DailyForecast]:
    """Normalize properties.periods into DailyForecast records, keeping order."""
    properties = payload.get("properties")
    periods = properties.get("periods") if isinstance(properties, dict) else None
    if not isinstance(periods, list):
        raise UpstreamDataMissing(
            ReasonCode.PERIODS_MISSING, "NWS forecast response missing periods"
        )

    forecasts = [_parse_period(p, i) for i, p in enumerate(periods)]
    logger.debug("Parsed %d NWS forecast periods", len(forecasts))
    return forecasts


def _parse_period(period: Any, index: int) -> DailyForecast:
    if not isinstance(period, dict):
        raise _field_missing(index, "period")

    start = period.get("startTime")
    try:
        # NOAA times look like "2026-02-11T06:00:00-05:00"; keep the local date
        start_date = datetime.fromisoformat(start).date()
    except (TypeError, ValueError):
        raise _field_missing(index, "startTime") from None

    is_daytime = period.get("isDaytime")
    if not isinstance(is_daytime, bool):
        raise _field_missing(index, "isDaytime")

    temperature = period.get("temperature")
    if isinstance(temperature, float) and temperature.is_integer():
        temperature = int(temperature)
    if isinstance(temperature, bool) or not isinstance(temperature, int):
        # fractional degrees are rejected rather than truncated
        raise _field_missing(index, "temperature")

    summary = period.get("shortForecast")
    return DailyForecast(
        date=start_date,
        temperature_c=to_celsius(temperature, period.get("temperatureUnit")),
        summary=summary if isinstance(summary, str) else "",
        is_daytime=is_daytime,
    )


def format_coordinate(value: float) -> str:
    """Shortest round-trip digits of value, written without an exponent."""
    return format(Decimal(repr(value)), "f")


def to_celsius(temperature: int, unit: str | None) -> int:
    """Convert to whole-degree Celsius when the unit is Fahrenheit.

    round() is half-to-even; integer Fahrenheit never lands on a .5 Celsius value.
    """
    if isinstance(unit, str) and unit.upper() == "F":
        return round((temperature - 32) * 5 / 9)
    return temperature


def _field_missing(index: int, field: str) -> UpstreamDataMissing:
    return UpstreamDataMissing(
        ReasonCode.PERIOD_FIELD_MISSING,
        f"NWS forecast period {index} missing or invalid '{field}'",
    )
