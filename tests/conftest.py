# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides canned Open-Meteo payloads and mock httpx.AsyncClient builders.

from unittest.mock import AsyncMock

import httpx
import pytest

from tests.helpers import json_response


@pytest.fixture
def geocode_payload() -> dict:
    return {
        "results": [
            {
                "id": 5128581,
                "name": "New York",
                "latitude": 40.71427,
                "longitude": -74.00597,
                "country": "United States",
                "timezone": "America/New_York",
            }
        ]
    }


@pytest.fixture
def forecast_payload() -> dict:
    return {
        "latitude": 40.710335,
        "longitude": -73.99307,
        "current": {
            "time": "2025-01-15T14:15",
            "interval": 900,
            "temperature_2m": 3.4,
            "relative_humidity_2m": 81,
            "apparent_temperature": -0.5,
            "precipitation": 0.2,
            "weather_code": 61,
            "cloud_cover": 100,
            "wind_speed_10m": 14.8,
        },
    }


@pytest.fixture
def upstream(geocode_payload, forecast_payload):
    """Mock httpx.AsyncClient answering a geocode call and then a forecast call."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get.side_effect = [json_response(geocode_payload), json_response(forecast_payload)]
    return client
