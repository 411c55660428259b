"""Forecast HTTP API: FastAPI app exposing the address-to-forecast pipeline."""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from geoforecast.config.schema import ServiceConfig
from geoforecast.models.outcome import OutcomeStatus
from geoforecast.pipeline.forecast_pipeline import ForecastPipeline, ProviderSet
from geoforecast.reporting.health_checker import HealthChecker

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    OutcomeStatus.INVALID_INPUT: "Query parameter 'address' is required.",
    OutcomeStatus.ADDRESS_NOT_FOUND: "Address could not be geocoded.",
    OutcomeStatus.INTERNAL_ERROR: "An error occurred while processing your request.",
}

router = APIRouter()


@router.get("/api/forecast")
async def get_forecast(request: Request, address: str | None = None):
    """Geocode an address and return its forecast periods in upstream order."""
    pipeline: ForecastPipeline = request.app.state.pipeline
    outcome = await pipeline.run(address)
    if not outcome.ok:
        raise HTTPException(outcome.http_status, ERROR_MESSAGES[outcome.status])
    return JSONResponse([f.to_dict() for f in outcome.forecasts])


@router.get("/api/health")
async def get_health(request: Request):
    """Provider reachability. Always 200; 'status' reports degradation."""
    checker: HealthChecker = request.app.state.health_checker
    status = await checker.check()
    return status.to_dict()


def create_app(
    config: ServiceConfig | None = None,
    pipeline: ForecastPipeline | None = None,
    health_checker: HealthChecker | None = None,
) -> FastAPI:
    """Build the app. Without an injected pipeline, provider clients live for the app's lifespan."""
    config = config or ServiceConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if pipeline is not None:
            yield
            return
        async with ProviderSet(config) as providers:
            app.state.pipeline = providers.pipeline
            logger.info(
                "Providers ready: geocoder=%s weather=%s",
                config.geocoder.base_url, config.weather.base_url,
            )
            yield
        logger.info("Provider clients closed")

    app = FastAPI(title="Address Forecast API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    if pipeline is not None:
        app.state.pipeline = pipeline
    app.state.health_checker = health_checker or HealthChecker(config)
    app.include_router(router)
    return app
