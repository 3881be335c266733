# ABOUTME: Dependency container for the lookup service using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and provider URLs used by weather_service.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_lookup.config import Settings
from weather_lookup.weather_service import FORECAST_URL, GEOCODING_URL


class WeatherDeps(BaseModel):
    """Per-app dependencies shared by every request handler."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL


def create_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    """Create an httpx client with a per-request timeout.

    No retry transport: a single upstream failure fails the lookup immediately.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout))


def build_deps(settings: Settings, http_client: httpx.AsyncClient | None = None) -> WeatherDeps:
    return WeatherDeps(
        http_client=http_client or create_http_client(settings.http_timeout_seconds),
        geocoding_url=settings.geocoding_url,
        forecast_url=settings.forecast_url,
    )
