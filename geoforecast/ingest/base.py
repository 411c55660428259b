"""Provider capabilities consumed by the forecast pipeline."""

from typing import Protocol

from geoforecast.models.forecast import Coordinates, DailyForecast


class CoordinateResolver(Protocol):
    async def resolve(self, address: str | None) -> Coordinates | None:
        """Return coordinates for an address, or None when it has no match."""
        ...


class ForecastRetriever(Protocol):
    async def forecast(self, latitude: float, longitude: float) -> list[DailyForecast]:
        """Return normalized forecast periods in upstream order."""
        ...
