"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest
import yaml

from geoforecast.config.schema import ServiceConfig
from geoforecast.models.forecast import Coordinates, DailyForecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"

CENSUS_TEST_URL = "https://test-census.example.com"
NWS_TEST_URL = "https://test-nws.example.com"


class FakeResolver:
    """Returns a fixed result (or raises) and records every address it sees."""

    def __init__(self, result: Coordinates | None = None, error: BaseException | None = None):
        self.result = result
        self.error = error
        self.calls: list[str | None] = []

    async def resolve(self, address: str | None) -> Coordinates | None:
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        return self.result


class FakeRetriever:
    def __init__(
        self,
        result: list[DailyForecast] | None = None,
        error: BaseException | None = None,
    ):
        self.result = result or []
        self.error = error
        self.calls: list[tuple[float, float]] = []

    async def forecast(self, latitude: float, longitude: float) -> list[DailyForecast]:
        self.calls.append((latitude, longitude))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def load_fixture():
    def _load(name: str):
        with open(FIXTURE_DIR / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def test_config() -> ServiceConfig:
    """Config pointing both providers at test hosts."""
    return ServiceConfig(
        geocoder={"base_url": CENSUS_TEST_URL},
        weather={"base_url": NWS_TEST_URL},
        http={"user_agent": "geoforecast-tests/1.0"},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "geocoder": {"benchmark": "Public_AR_Current"},
        "http": {"user_agent": "yaml-agent/2.0"},
        "server": {"port": 9000},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def white_house() -> Coordinates:
    return Coordinates(latitude=38.8977, longitude=-77.0365)


@pytest.fixture
def day_and_night() -> list[DailyForecast]:
    return [
        DailyForecast(date=date(2026, 2, 11), temperature_c=20, summary="Sunny", is_daytime=True),
        DailyForecast(date=date(2026, 2, 11), temperature_c=10, summary="Clear", is_daytime=False),
    ]


@pytest.fixture
def fake_resolver():
    return FakeResolver


@pytest.fixture
def fake_retriever():
    return FakeRetriever
