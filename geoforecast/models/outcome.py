"""Per-request pipeline outcome."""

from dataclasses import dataclass, field
from enum import StrEnum

from geoforecast.models.errors import ReasonCode
from geoforecast.models.forecast import DailyForecast


class OutcomeStatus(StrEnum):
    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    ADDRESS_NOT_FOUND = "address_not_found"
    INTERNAL_ERROR = "internal_error"


HTTP_STATUS = {
    OutcomeStatus.SUCCESS: 200,
    OutcomeStatus.INVALID_INPUT: 400,
    OutcomeStatus.ADDRESS_NOT_FOUND: 404,
    OutcomeStatus.INTERNAL_ERROR: 500,
}


@dataclass(frozen=True)
class ForecastOutcome:
    status: OutcomeStatus
    forecasts: list[DailyForecast] = field(default_factory=list)
    reason: ReasonCode | None = None  # diagnostics only, never sent to clients

    @property
    def http_status(self) -> int:
        return HTTP_STATUS[self.status]

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS
