"""Operational health models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthStatus:
    geocoder_reachable: bool
    weather_reachable: bool

    @property
    def status(self) -> str:
        return "ok" if self.geocoder_reachable and self.weather_reachable else "degraded"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "geocoder_reachable": self.geocoder_reachable,
            "weather_reachable": self.weather_reachable,
        }
