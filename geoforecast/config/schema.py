"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from geoforecast.config.defaults import (
    CENSUS_BASE_URL,
    DEFAULT_BENCHMARK,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    NWS_BASE_URL,
)


class GeocoderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = CENSUS_BASE_URL
    benchmark: str = Field(default=DEFAULT_BENCHMARK, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_BASE_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("user_agent")
    @classmethod
    def _user_agent_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("user_agent must not be empty")
        return value


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoder: GeocoderConfig = GeocoderConfig()
    weather: WeatherConfig = WeatherConfig()
    http: HttpConfig = HttpConfig()
    server: ServerConfig = ServerConfig()
