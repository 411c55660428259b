"""Default provider endpoints and request identity."""

CENSUS_BASE_URL = "https://geocoding.geo.census.gov"
NWS_BASE_URL = "https://api.weather.gov"

# 2020 is the last full benchmark the Census geocoder publishes
DEFAULT_BENCHMARK = "2020"

# api.weather.gov rejects requests without a User-Agent
DEFAULT_USER_AGENT = "geoforecast/0.1.0 (+https://example.com)"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8777
DEFAULT_CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]
