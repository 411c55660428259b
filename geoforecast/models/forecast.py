"""Coordinate and forecast value objects."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class DailyForecast:
    """One upstream forecast period, normalized to whole-degree Celsius.

    Despite the name there is one record per period, so a single date usually
    appears twice (day and night).
    """

    date: date
    temperature_c: int
    summary: str
    is_daytime: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "temperatureC": self.temperature_c,
            "summary": self.summary,
            "isDaytime": self.is_daytime,
        }
