"""Health checker: reachability of the geocoding and weather providers."""

import logging

import httpx

from geoforecast.config.schema import ServiceConfig
from geoforecast.models.reporting import HealthStatus

logger = logging.getLogger(__name__)


class HealthChecker:
    def __init__(self, config: ServiceConfig, timeout: float = 10.0):
        self.config = config
        self.timeout = timeout

    async def check(self) -> HealthStatus:
        headers = {"User-Agent": self.config.http.user_agent}
        async with httpx.AsyncClient(headers=headers, timeout=self.timeout) as client:
            geocoder_ok = await self._reachable(client, self.config.geocoder.base_url)
            weather_ok = await self._reachable(client, self.config.weather.base_url)
        return HealthStatus(geocoder_reachable=geocoder_ok, weather_reachable=weather_ok)

    async def _reachable(self, client: httpx.AsyncClient, url: str) -> bool:
        try:
            resp = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Health check of %s failed: %s", url, e)
            return False
        return resp.status_code < 500
