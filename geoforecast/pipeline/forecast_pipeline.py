"""Forecast pipeline: validate, geocode, forecast, classify the outcome."""

import logging

from geoforecast.config.schema import ServiceConfig
from geoforecast.ingest.base import CoordinateResolver, ForecastRetriever
from geoforecast.ingest.census_client import CensusGeocoder
from geoforecast.ingest.nws_client import NwsClient
from geoforecast.models.errors import ReasonCode, UpstreamError
from geoforecast.models.outcome import ForecastOutcome, OutcomeStatus

logger = logging.getLogger(__name__)


class ForecastPipeline:
    """Stateless orchestrator; one instance serves concurrent requests."""

    def __init__(self, resolver: CoordinateResolver, retriever: ForecastRetriever):
        self.resolver = resolver
        self.retriever = retriever

    async def run(self, address: str | None) -> ForecastOutcome:
        """Run one request through the pipeline.

        Every Exception is converted to INTERNAL_ERROR here and nowhere else.
        asyncio.CancelledError is not an Exception and propagates to the caller.
        """
        logger.info("Received forecast request for address=%r", address)

        # 1. VALIDATE
        if address is None or not address.strip():
            logger.warning("Empty address provided")
            return ForecastOutcome(OutcomeStatus.INVALID_INPUT, reason=ReasonCode.INVALID_INPUT)

        try:
            # 2. RESOLVE
            coords = await self.resolver.resolve(address)
            if coords is None:
                logger.warning("Could not geocode address=%r", address)
                return ForecastOutcome(
                    OutcomeStatus.ADDRESS_NOT_FOUND, reason=ReasonCode.ADDRESS_NOT_FOUND
                )
            logger.info(
                "Geocoded address=%r to %s,%s", address, coords.latitude, coords.longitude
            )

            # 3. RETRIEVE
            forecasts = await self.retriever.forecast(coords.latitude, coords.longitude)
        except UpstreamError as e:
            logger.exception(
                "Upstream failure for address=%r reason=%s status=%s",
                address, e.reason, e.status_code,
            )
            return ForecastOutcome(OutcomeStatus.INTERNAL_ERROR, reason=e.reason)
        except Exception:
            logger.exception("Error processing forecast request for address=%r", address)
            return ForecastOutcome(
                OutcomeStatus.INTERNAL_ERROR, reason=ReasonCode.UNEXPECTED_ERROR
            )

        logger.info("Retrieved forecast with %d periods for address=%r", len(forecasts), address)
        return ForecastOutcome(OutcomeStatus.SUCCESS, forecasts=forecasts)


class ProviderSet:
    """Owns the production provider clients and their HTTP connections."""

    def __init__(self, config: ServiceConfig):
        self.geocoder = CensusGeocoder(
            base_url=config.geocoder.base_url,
            benchmark=config.geocoder.benchmark,
            user_agent=config.http.user_agent,
            timeout=config.geocoder.timeout_seconds,
        )
        self.weather = NwsClient(
            base_url=config.weather.base_url,
            user_agent=config.http.user_agent,
            timeout=config.weather.timeout_seconds,
        )
        self.pipeline = ForecastPipeline(self.geocoder, self.weather)

    async def aclose(self) -> None:
        try:
            await self.geocoder.aclose()
        finally:
            await self.weather.aclose()

    async def __aenter__(self) -> "ProviderSet":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
