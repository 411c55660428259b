"""Error taxonomy for the address-to-forecast pipeline."""

from enum import StrEnum


class ReasonCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"
    GEOCODE_RESULT_MISSING = "GEOCODE_RESULT_MISSING"
    GEOCODE_COORDINATES_MISSING = "GEOCODE_COORDINATES_MISSING"
    GEOCODE_INVALID_JSON = "GEOCODE_INVALID_JSON"
    POINTS_LOOKUP_FAILED = "POINTS_LOOKUP_FAILED"
    FORECAST_URL_MISSING = "FORECAST_URL_MISSING"
    FORECAST_FETCH_FAILED = "FORECAST_FETCH_FAILED"
    PERIODS_MISSING = "PERIODS_MISSING"
    PERIOD_FIELD_MISSING = "PERIOD_FIELD_MISSING"
    INVALID_JSON = "INVALID_JSON"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ForecastServiceError(Exception):
    """Base class for pipeline errors."""


class InvalidInputError(ForecastServiceError, ValueError):
    """Caller supplied a missing or blank address."""


class UpstreamError(ForecastServiceError):
    """An external provider failed or returned an unusable payload."""

    def __init__(
        self, reason: ReasonCode, message: str, status_code: int | None = None
    ):
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code


class UpstreamLookupFailed(UpstreamError):
    """Forecast location lookup returned a non-success status."""


class UpstreamFetchFailed(UpstreamError):
    """Forecast fetch returned a non-success status."""


class UpstreamDataMissing(UpstreamError):
    """Upstream response is missing a field the pipeline depends on."""
